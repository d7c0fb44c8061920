"""
Abstract interface for input sources
"""

from abc import ABC, abstractmethod
from typing import List

from .input_event import InputEvent


class IInputSource(ABC):
    """
    Abstract interface for anything that produces player input.

    Polled once per frame by the game manager. Implementations can use a
    terminal, GPIO buttons, a window, a network socket or a test queue.
    """

    @abstractmethod
    def setup(self) -> None:
        """Initialize the input hardware/resources"""
        pass

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """
        Non-blocking read of everything that happened since the last poll.

        Returns:
            Events in arrival order, empty list if nothing happened
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """
        Release input resources.

        Should be called before program exit (restores terminal settings,
        releases GPIO pins, etc.)
        """
        pass
