"""Shared fixtures for the Simon memory game test suite."""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional
from unittest.mock import MagicMock

import pytest

# Ensure src/ is on sys.path so the game packages resolve
SRC_ROOT = Path(__file__).resolve().parent.parent
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from audio_system import MockTonePlayer
from memory_game import GameConfig, GameController, IPresenter, Phase, ScriptedSignalSource
from storage import InMemoryBestScoreStore
from utils import CallScheduler, HybridLogger


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


class GameHarness:
    """Controller plus the fakes around it, with helpers to move time."""

    def __init__(self, controller, clock, presenter, audio_player, store):
        self.controller = controller
        self.clock = clock
        self.presenter = presenter
        self.audio_player = audio_player
        self.store = store

    @property
    def session(self):
        return self.controller.session

    def advance(self, ms: float) -> int:
        self.clock.advance(ms)
        return self.controller.tick()

    def advance_until(self, phase: Phase, limit_ms: float = 60000, step_ms: float = 10) -> float:
        """Advance in small steps until the controller reaches `phase`."""
        elapsed = 0.0
        while self.controller.phase is not phase:
            if elapsed >= limit_ms:
                raise AssertionError(f"Phase {phase} not reached within {limit_ms}ms (at {self.controller.phase})")
            self.advance(step_ms)
            elapsed += step_ms
        return elapsed

    def start_and_wait_for_input(self) -> None:
        self.controller.start()
        self.advance_until(Phase.AWAITING_INPUT)

    def press_sequence(self) -> None:
        """Reproduce the current sequence correctly."""
        for signal in self.controller.engine.sequence:
            self.controller.handle_signal(signal)

    def complete_round(self) -> None:
        """Answer the current round and wait for the next one to accept input."""
        self.press_sequence()
        self.advance_until(Phase.AWAITING_INPUT)


@pytest.fixture
def hybrid_logger(tmp_path):
    logger = HybridLogger("simon_test", log_dir=str(tmp_path / "logs"), console=False)
    yield logger
    logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def log_text(hybrid_logger, tmp_path):
    """Callable returning everything written to the test log file so far."""
    def read() -> str:
        for handler in hybrid_logger.main_logger.handlers:
            handler.flush()
        return "".join(p.read_text(encoding="utf-8") for p in (tmp_path / "logs").glob("*.log"))
    return read


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def presenter():
    return MagicMock(spec=IPresenter)


@pytest.fixture
def make_game(logger, clock, presenter):
    """Factory building a controller on the manual clock with scripted signals."""

    def factory(signals: Optional[Iterable[int]] = None,
                store=None,
                config: Optional[GameConfig] = None) -> GameHarness:
        store = store if store is not None else InMemoryBestScoreStore()
        audio_player = MockTonePlayer(logger=logger)
        scripted = list(signals) if signals is not None else [0, 1, 2, 3] * 10
        controller = GameController(
            presenter=presenter,
            audio_player=audio_player,
            best_score_store=store,
            logger=logger,
            config=config or GameConfig(),
            signal_source=ScriptedSignalSource(scripted),
            scheduler=CallScheduler(clock=clock, logger=logger)
        )
        return GameHarness(controller, clock, presenter, audio_player, store)

    return factory
