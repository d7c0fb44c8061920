"""
Timing utility for throttling execution in the frame loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    The game loop runs every frame (20ms) but some work, like resource
    usage logging, only needs to happen once a minute.

    Example:
        self._usage_monitor = OnceInMs(60000)

        # In the frame loop:
        if self._usage_monitor.should_execute():
            self._log_resource_usage()
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Seconds clock, injectable for tests
        """
        self.interval_ms = interval_ms
        self._clock = clock
        self.last_execution = None

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and update timer if so.

        The first call always returns True.
        """
        current = self._clock()
        if self.last_execution is None or (current - self.last_execution) * 1000 >= self.interval_ms:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None
