"""
Abstract interfaces for the collaborators the game controller talks to
"""

from abc import ABC, abstractmethod


class BestScoreStoreError(Exception):
    """Reading or writing the best score failed"""


class IPresenter(ABC):
    """
    Visual side of the game: pads, status line, score board, end summary.

    Implementations can render to a terminal, a window, LEDs, or nothing.
    """

    @abstractmethod
    def on_signal_activated(self, index: int) -> None:
        """
        Pulse pad `index`. The pulse length is owned by the presenter.

        Args:
            index: Signal index (0-based)
        """
        pass

    @abstractmethod
    def on_status_changed(self, text: str) -> None:
        """Show a human-readable status line ("Level 3", "Your turn!", ...)"""
        pass

    @abstractmethod
    def on_score_changed(self, level: int, score: int) -> None:
        """Level or score changed"""
        pass

    @abstractmethod
    def on_best_score_changed(self, best: int) -> None:
        """Best score changed (also called once at startup)"""
        pass

    @abstractmethod
    def on_game_over(self, level: int, score: int) -> None:
        """Show the end-of-session summary"""
        pass

    def on_game_over_dismissed(self) -> None:
        """Player acknowledged the summary (override if needed)"""
        pass

    def on_reset(self) -> None:
        """Clear any active presentation markers (override if needed)"""
        pass

    def update(self) -> None:
        """Per-frame hook, e.g. to expire pad pulses (override if needed)"""
        pass


class IAudioPlayer(ABC):
    """Tone output: one distinct tone per signal plus an error tone"""

    @abstractmethod
    def play_tone(self, index: int) -> None:
        """Play the tone for signal `index`"""
        pass

    @abstractmethod
    def play_error_tone(self) -> None:
        """Play the mismatch tone"""
        pass

    def cleanup(self) -> None:
        """Release audio resources (override if needed)"""
        pass


class IBestScoreStore(ABC):
    """
    Persistent best-score record.

    Implementations raise BestScoreStoreError on failure; the
    controller treats those as non-fatal.
    """

    @abstractmethod
    def load(self) -> int:
        """
        Returns:
            Stored best score, 0 if nothing is stored yet
        """
        pass

    @abstractmethod
    def save(self, best_score: int) -> None:
        """Persist a new best score"""
        pass
