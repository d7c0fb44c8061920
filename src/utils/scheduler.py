"""
Cooperative delayed-call scheduler for the frame loop
"""

import heapq
import itertools
import time
from typing import Callable, List, Optional


def monotonic_ms() -> float:
    """Default scheduler clock in milliseconds"""
    return time.monotonic() * 1000.0


class ScheduledCall:
    """
    Handle for a callback registered with CallScheduler.

    A call fires at most once. It is skipped when cancelled or when the
    scheduler generation advanced after it was scheduled.
    """

    def __init__(self, due_ms: float, order: int, generation: int,
                 callback: Callable[[], None], name: str):
        self.due_ms = due_ms
        self.order = order
        self.generation = generation
        self.callback = callback
        self.name = name
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Prevent this call from firing"""
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def __lt__(self, other: 'ScheduledCall') -> bool:
        return (self.due_ms, self.order) < (other.due_ms, other.order)

    def __repr__(self) -> str:
        return f"ScheduledCall(name='{self.name}', due_ms={self.due_ms:.0f}, generation={self.generation})"


class CallScheduler:
    """
    Single-threaded timer queue driven by run_due().

    Nothing runs in the background: the owner calls run_due() once per frame
    and every call whose due time has passed fires in (due time, schedule
    order) order. Calls scheduled from inside a callback with zero delay fire
    in the same run_due() pass.

    cancel_all() advances the generation counter, so a callback captured
    before a reset can never fire after it, even if a handle leaked.

    Example:
        scheduler = CallScheduler()
        scheduler.call_later(500, play_first_signal, name="lead-in")

        # In the frame loop:
        scheduler.run_due()
    """

    def __init__(self, clock: Callable[[], float] = monotonic_ms, logger=None):
        """
        Args:
            clock: Millisecond clock, injectable for tests
            logger: Optional ClassLogger for debug output
        """
        self._clock = clock
        self._logger = logger
        self._queue: List[ScheduledCall] = []
        self._counter = itertools.count()
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def now_ms(self) -> float:
        return self._clock()

    def call_later(self, delay_ms: float, callback: Callable[[], None], name: str = "") -> ScheduledCall:
        """
        Schedule callback to run delay_ms from now.

        Raises:
            ValueError: If delay_ms is negative
        """
        if delay_ms < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_ms}")

        call = ScheduledCall(
            due_ms=self._clock() + delay_ms,
            order=next(self._counter),
            generation=self._generation,
            callback=callback,
            name=name or getattr(callback, "__name__", "call"),
        )
        heapq.heappush(self._queue, call)
        if self._logger:
            self._logger.debug(f"Scheduled '{call.name}' in {delay_ms:.0f}ms (generation {call.generation})")
        return call

    def cancel_all(self) -> int:
        """
        Invalidate every pending call.

        Returns:
            Number of calls that were still pending
        """
        dropped = sum(1 for call in self._queue if call.pending)
        for call in self._queue:
            call.cancel()
        self._queue.clear()
        self._generation += 1
        if dropped and self._logger:
            self._logger.debug(f"Cancelled {dropped} pending call(s), generation now {self._generation}")
        return dropped

    def run_due(self) -> int:
        """
        Fire every call whose due time has passed.

        Returns:
            Number of callbacks executed
        """
        executed = 0
        now = self._clock()
        while self._queue and self._queue[0].due_ms <= now:
            call = heapq.heappop(self._queue)
            if call.cancelled or call.generation != self._generation:
                continue
            call.fired = True
            call.callback()
            executed += 1
        return executed

    def pending_count(self) -> int:
        return sum(1 for call in self._queue if call.pending and call.generation == self._generation)

    def next_due_ms(self) -> Optional[float]:
        """Due time of the earliest pending call, None if idle"""
        pending = [call.due_ms for call in self._queue
                   if call.pending and call.generation == self._generation]
        return min(pending) if pending else None
