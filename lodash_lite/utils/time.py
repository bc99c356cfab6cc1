"""
Timer schedulers for deferred, single-shot callbacks.

This module provides the "host timer facility" that debounce and throttle
delegate to. Instead of calling threading.Timer or loop.call_later directly,
the timing wrappers depend on a Scheduler object. This enables deterministic
tests: a ManualScheduler advances virtual time on demand, so a test can assert
exactly what fired after 299 ms versus 300 ms without sleeping.

The key insight: depending on a Scheduler abstraction instead of real timers
makes timing code testable and reproducible, and lets the same wrapper run on
a thread-based host or inside an asyncio event loop.
"""

import asyncio
import heapq
import itertools
import logging
import threading
from typing import Callable, List, Optional, Protocol, Tuple

from lodash_lite.core.errors import SchedulerError

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """
    Abstract deferred-callback facility.

    **Conceptual**: A Scheduler is any object that can answer "run this
    callback once, delay_ms milliseconds from now" and hand back a handle that
    cancels it. Registering never blocks the caller.

    **Usage**: Consumers accept a Scheduler (constructor or function
    parameter) and call scheduler.call_later() whenever they need a timer.
    In production, pass a ThreadingScheduler or AsyncioScheduler; in tests,
    pass a ManualScheduler.

    **Example**:
        def remind(scheduler: Scheduler):
            handle = scheduler.call_later(500, lambda: print("ping"))
            ...
            handle.cancel()
    """

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Schedule callback to run once after delay_ms milliseconds.

        Returns:
            Handle whose cancel() prevents the callback if it has not run yet.
        """
        ...


class ThreadingScheduler:
    """
    Scheduler backed by threading.Timer.

    Each callback runs on its own daemon timer thread, so pending timers never
    keep the interpreter alive at exit.

    **Usage**:
        scheduler = ThreadingScheduler()
        handle = scheduler.call_later(300, flush)
    """

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(max(delay_ms, 0) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    **Conceptual**: Callbacks run on the loop thread via loop.call_later, so
    wrappers used from coroutines never touch other threads. When no loop is
    given, the loop running at call time is used.

    **Usage**:
        async def main():
            scheduler = AsyncioScheduler()
            save = debounce(write_draft, 300, scheduler=scheduler)
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Args:
            loop: Event loop to schedule on. If None, the running loop at the
                  time of each call_later() is used.
        """
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise SchedulerError(
                    "AsyncioScheduler without an explicit loop must be used "
                    "from inside a running event loop."
                ) from e
        return loop.call_later(max(delay_ms, 0) / 1000.0, callback)


class _ManualHandle:
    """Handle returned by ManualScheduler; cancelled entries are skipped."""

    def __init__(self, due_ms: float):
        self.due_ms = due_ms
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Scheduler driven by a virtual clock (for deterministic tests).

    **Conceptual**: Nothing fires until the test calls advance(). Time only
    moves when told to, which makes it possible to assert precisely what
    happens at each millisecond boundary without wall-clock sleeps or flaky
    margins. Callbacks scheduled during advance() that fall inside the
    advanced window also fire, in due-time order.

    **Usage**:
        scheduler = ManualScheduler()
        save = debounce(write_draft, 300, scheduler=scheduler)
        save("a")
        scheduler.advance(299)   # nothing yet
        scheduler.advance(1)     # write_draft("a") runs now
    """

    def __init__(self, start_ms: float = 0.0):
        """
        Args:
            start_ms: Initial virtual time in milliseconds.
        """
        self._now_ms = float(start_ms)
        self._queue: List[Tuple[float, int, _ManualHandle, Callable[[], None]]] = []
        self._counter = itertools.count()

    @property
    def now_ms(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now_ms

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that are neither fired nor cancelled."""
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _ManualHandle(self._now_ms + max(delay_ms, 0))
        # The counter breaks ties so equal due times fire in scheduling order.
        heapq.heappush(self._queue, (handle.due_ms, next(self._counter), handle, callback))
        return handle

    def advance(self, ms: float) -> int:
        """
        Move virtual time forward by ms, firing every callback that comes due.

        Args:
            ms: Milliseconds to advance (must be >= 0).

        Returns:
            Number of callbacks fired.

        Raises:
            SchedulerError: If ms is negative.
        """
        if ms < 0:
            raise SchedulerError(f"Cannot advance a ManualScheduler backwards (got {ms} ms).")

        target = self._now_ms + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now_ms = due_ms
            callback()
            fired += 1
        self._now_ms = target
        return fired

    def run_all(self) -> int:
        """
        Fire every pending callback, advancing time to the last due time.

        Returns:
            Number of callbacks fired.
        """
        fired = 0
        while self.pending:
            last_due = max(entry[0] for entry in self._queue if not entry[2].cancelled)
            fired += self.advance(last_due - self._now_ms)
        return fired


def get_default_scheduler() -> Scheduler:
    """
    Build the scheduler named by the LODASH_LITE_SCHEDULER setting.

    **Conceptual**: Factory used by debounce/throttle when no scheduler is
    passed explicitly. "thread" (default) gives a ThreadingScheduler,
    "asyncio" an AsyncioScheduler bound to the running loop at call time,
    "manual" a fresh ManualScheduler.

    Returns:
        A new Scheduler instance.
    """
    from lodash_lite.config.settings import get_settings

    name = get_settings().timing.scheduler
    logger.debug("Using %s scheduler", name)
    if name == "asyncio":
        return AsyncioScheduler()
    if name == "manual":
        return ManualScheduler()
    return ThreadingScheduler()
