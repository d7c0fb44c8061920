"""
Console presenter - renders the game to an ANSI terminal
"""

import sys
import time
from typing import Callable, List, Optional, TextIO

from memory_game.interfaces import IPresenter

# Classic pad colors: green, red, yellow, blue
PAD_COLORS: List[str] = ['\033[32m', '\033[31m', '\033[33m', '\033[34m']
BRIGHT = '\033[1;7m'
DIM = '\033[2m'
RESET = '\033[0m'


class ConsolePresenter(IPresenter):
    """
    Terminal rendering of the pads, status line and score board.

    A pad pulse shows the pad highlighted; update() redraws it unlit once
    flash_ms has passed. Lines end with CR LF so output stays aligned while
    the keyboard source holds the terminal in raw mode.
    """

    def __init__(self,
                 logger,
                 signal_count: int = 4,
                 flash_ms: int = 300,
                 stream: Optional[TextIO] = None,
                 use_colors: bool = True,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            logger: ClassLogger instance for logging
            signal_count: Number of pads
            flash_ms: Pad pulse length in milliseconds
            stream: Output stream, defaults to sys.stdout
            use_colors: Emit ANSI colors
            clock: Seconds clock, injectable for tests
        """
        self.logger = logger
        self.signal_count = signal_count
        self.flash_ms = flash_ms
        self._stream = stream if stream is not None else sys.stdout
        self._use_colors = use_colors
        self._clock = clock

        self.active_signal: Optional[int] = None
        self._active_since = 0.0
        self.status = ""
        self.level = 0
        self.score = 0
        self.best_score = 0
        self.game_over_visible = False

    # ============================================================================
    # IPresenter
    # ============================================================================

    def on_signal_activated(self, index: int) -> None:
        self.active_signal = index
        self._active_since = self._clock()
        self._write(self.render_pads())

    def on_status_changed(self, text: str) -> None:
        self.status = text
        self._write(f"▶ {text}")

    def on_score_changed(self, level: int, score: int) -> None:
        self.level = level
        self.score = score
        self._write(self.render_scoreboard())

    def on_best_score_changed(self, best: int) -> None:
        self.best_score = best
        self._write(self.render_scoreboard())

    def on_game_over(self, level: int, score: int) -> None:
        self.game_over_visible = True
        self._write(self._paint('\033[91m', "=" * 36))
        self._write(self._paint('\033[91m', "GAME OVER"))
        self._write(f"You reached level {level} with {score} points!")
        self._write("Press Enter to dismiss")
        self._write(self._paint('\033[91m', "=" * 36))

    def on_game_over_dismissed(self) -> None:
        if self.game_over_visible:
            self.game_over_visible = False
            self.logger.debug("Game over summary dismissed")

    def on_reset(self) -> None:
        self.active_signal = None

    def update(self) -> None:
        """Expire the pad pulse"""
        if self.active_signal is None:
            return
        if (self._clock() - self._active_since) * 1000 >= self.flash_ms:
            self.active_signal = None
            self._write(self.render_pads())

    # ============================================================================
    # RENDERING
    # ============================================================================

    def render_pads(self) -> str:
        """One line with every pad, the active one highlighted"""
        pads = []
        for index in range(self.signal_count):
            label = f"[ {index + 1} ]"
            color = PAD_COLORS[index % len(PAD_COLORS)]
            if index == self.active_signal:
                pads.append(self._paint(BRIGHT + color, label))
            else:
                pads.append(self._paint(DIM + color, label))
        return "  ".join(pads)

    def render_scoreboard(self) -> str:
        return f"Level: {self.level}  Score: {self.score}  Best: {self.best_score}"

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{RESET}" if self._use_colors else text

    def _write(self, line: str) -> None:
        self._stream.write(line + "\r\n")
        self._stream.flush()
