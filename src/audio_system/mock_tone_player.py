"""
Mock Tone Player - No-op implementation for running without audio hardware
"""

from typing import List

from memory_game.interfaces import IAudioPlayer


class MockTonePlayer(IAudioPlayer):
    """
    Mock implementation of TonePlayer that performs no audio operations.

    Every request is logged at DEBUG and recorded, so tests and headless
    runs can check what would have been heard.
    """

    ERROR_TONE = -1

    def __init__(self, logger=None):
        """
        Args:
            logger: Optional ClassLogger instance for logging
        """
        self.logger = logger
        self.played: List[int] = []  # Signal indexes, ERROR_TONE for the error tone
        if self.logger:
            self.logger.info("🔇 MockTonePlayer initialized (audio disabled)")

    def play_tone(self, index: int) -> None:
        self.played.append(index)
        if self.logger:
            self.logger.debug(f"Mock: Playing tone {index}")

    def play_error_tone(self) -> None:
        self.played.append(self.ERROR_TONE)
        if self.logger:
            self.logger.debug("Mock: Playing error tone")

    def cleanup(self) -> None:
        self.played.clear()
