"""
Programmatic input source for tests, demos and alternative front ends
"""

from collections import deque
from typing import Deque, List

from .input_event import InputEvent, InputEventKind
from .interfaces import IInputSource


class QueuedInputSource(IInputSource):
    """
    Input source fed by code instead of hardware.

    Events pushed between two polls are delivered together, in push order,
    on the next poll_events().
    """

    def __init__(self, logger=None):
        self._logger = logger
        self._queue: Deque[InputEvent] = deque()
        self.is_setup = False

    def setup(self) -> None:
        self.is_setup = True

    def push(self, event: InputEvent) -> None:
        self._queue.append(event)

    def press(self, signal_index: int) -> None:
        """Queue a signal press"""
        self.push(InputEvent.signal(signal_index))

    def request(self, kind: InputEventKind) -> None:
        """Queue a control event (start, reset, quit, ...)"""
        self.push(InputEvent.of(kind))

    def poll_events(self) -> List[InputEvent]:
        events = list(self._queue)
        self._queue.clear()
        if events and self._logger:
            self._logger.debug(f"Delivering {len(events)} queued event(s)")
        return events

    def cleanup(self) -> None:
        self._queue.clear()
        self.is_setup = False
