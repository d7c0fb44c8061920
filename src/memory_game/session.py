"""
Session - live state of one game
"""

import enum
from dataclasses import dataclass, field
from typing import List


class Phase(enum.Enum):
    IDLE = "idle"
    PLAYBACK = "playback"
    AWAITING_INPUT = "awaiting_input"
    ROUND_RESOLVING = "round_resolving"
    GAME_OVER = "game_over"


@dataclass
class Session:
    """
    Mutable game state shared by the controller and its states.

    best_score survives clear(); everything else is per session.
    """
    speed_ms: int
    best_score: int = 0
    level: int = 0
    score: int = 0
    strict_mode: bool = False
    started: bool = False
    phase: Phase = Phase.IDLE
    user_input: List[int] = field(default_factory=list)

    def clear(self, base_speed_ms: int) -> None:
        """Return to a fresh idle session, keeping best_score"""
        self.level = 0
        self.score = 0
        self.strict_mode = False
        self.started = False
        self.speed_ms = base_speed_ms
        self.user_input.clear()

    def __str__(self) -> str:
        return (
            f"Session(phase={self.phase.value}, level={self.level}, score={self.score}, "
            f"best={self.best_score}, strict={self.strict_mode}, speed={self.speed_ms}ms)"
        )
