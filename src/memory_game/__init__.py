"""
Memory Game - State machine based Simon sequence-memory game

This module provides the core of the game: the sequence engine, the
session model, the state machine with its controller, and the frame loop
that drives it.
"""

from .config import GameConfig, TimingConfig, AudioConfig
from .interfaces import IPresenter, IAudioPlayer, IBestScoreStore, BestScoreStoreError
from .sequence_engine import (
    SequenceEngine,
    CheckOutcome,
    CheckResult,
    RandomSignalSource,
    ScriptedSignalSource,
)
from .session import Session, Phase
from .states import GameState, IdleState, PlaybackState, AwaitingInputState, RoundResolvingState, GameOverState
from .game_controller import GameController
from .game_manager import GameManager

__all__ = [
    # Configuration
    "GameConfig",
    "TimingConfig",
    "AudioConfig",
    # Collaborator interfaces
    "IPresenter",
    "IAudioPlayer",
    "IBestScoreStore",
    "BestScoreStoreError",
    # Sequence engine
    "SequenceEngine",
    "CheckOutcome",
    "CheckResult",
    "RandomSignalSource",
    "ScriptedSignalSource",
    # Session and states
    "Session",
    "Phase",
    "GameState",
    "IdleState",
    "PlaybackState",
    "AwaitingInputState",
    "RoundResolvingState",
    "GameOverState",
    # Orchestration
    "GameController",
    "GameManager"
]
