"""
Timing-control wrappers for function invocation: debounce and throttle.

**Conceptual**: Both wrappers sit between a noisy caller (UI events, file
watchers, webhook bursts) and an expensive function, and decide when the
function actually runs:

  - Debounce: wait for a quiet period, then run once with the latest
    arguments (trailing edge only). Every new call restarts the wait.
  - Throttle: run immediately, then ignore calls for a fixed window. Calls
    inside the window are dropped, not queued.

**State**: Each wrapper object owns exactly one piece of state: a pending timer
handle (Debounced) or a suppression flag (Throttled). Wrappers built from the
same function never share state.

**Scheduling**: Deferral is delegated to a Scheduler (see utils/time.py); the
wrapper registers a timer and returns immediately, it never sleeps. All delays
are in milliseconds.
"""

import functools
import logging
import threading
from typing import Any, Callable, Optional

from lodash_lite.utils.time import Scheduler, TimerHandle, get_default_scheduler

logger = logging.getLogger(__name__)


def _describe(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


class Debounced:
    """
    Trailing-edge debounced wrapper around a function.

    **Behavior**: Each call cancels the pending invocation (if any) and
    schedules a new one wait milliseconds later with this call's arguments.
    If no further call arrives within wait, the function runs exactly once
    with the last-seen arguments. Calling the wrapper returns None.

    There is no public cancel(): a pending invocation is only ever superseded
    by the next call.

    **Usage**:
        save = Debounced(write_draft, 300)
        save("a"); save("ab"); save("abc")
        # ~300 ms later: write_draft("abc") runs once
    """

    def __init__(self, func: Callable[..., Any], wait: float, scheduler: Optional[Scheduler] = None):
        """
        Args:
            func: Function to debounce.
            wait: Quiet period in milliseconds.
            scheduler: Timer backend. Defaults to get_default_scheduler().
        """
        self._func = func
        self._wait = wait
        self._scheduler = scheduler if scheduler is not None else get_default_scheduler()
        self._handle: Optional[TimerHandle] = None
        self._lock = threading.Lock()
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("Debounced %s: pending call superseded", _describe(self._func))

            handle = None

            def fire() -> None:
                with self._lock:
                    if self._handle is not handle:
                        return
                    self._handle = None
                self._func(*args, **kwargs)

            handle = self._handle = self._scheduler.call_later(self._wait, fire)


class Throttled:
    """
    Throttled wrapper around a function.

    **Behavior**: The first call runs the function immediately and opens a
    suppression window of limit milliseconds. Calls arriving inside the window
    are dropped entirely. Once the window closes, the next call runs
    immediately and reopens it. Calling the wrapper returns None.

    If the function raises, the window is not opened and the exception
    propagates to the caller.

    **Usage**:
        report = Throttled(send_progress, 1000)
        for chunk in stream:
            report(chunk)  # at most one send_progress per second
    """

    def __init__(self, func: Callable[..., Any], limit: float, scheduler: Optional[Scheduler] = None):
        """
        Args:
            func: Function to throttle.
            limit: Suppression window in milliseconds.
            scheduler: Timer backend. Defaults to get_default_scheduler().
        """
        self._func = func
        self._limit = limit
        self._scheduler = scheduler if scheduler is not None else get_default_scheduler()
        self._suppressing = False
        self._lock = threading.Lock()
        functools.update_wrapper(self, func)

    def _reopen(self) -> None:
        with self._lock:
            self._suppressing = False

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._suppressing:
                logger.debug("Throttled %s: call dropped", _describe(self._func))
                return
            self._suppressing = True

        try:
            self._func(*args, **kwargs)
        except Exception:
            self._reopen()
            raise

        self._scheduler.call_later(self._limit, self._reopen)


def debounce(func: Callable[..., Any], wait: float, scheduler: Optional[Scheduler] = None) -> Debounced:
    """
    Create a debounced wrapper that delays invoking func until wait
    milliseconds have passed since the last call.

    Example:
        >>> scheduler = ManualScheduler()
        >>> calls = []
        >>> log = debounce(calls.append, 300, scheduler=scheduler)
        >>> log(1); log(2); log(3)
        >>> scheduler.advance(300)
        1
        >>> calls
        [3]
    """
    return Debounced(func, wait, scheduler=scheduler)


def throttle(func: Callable[..., Any], limit: float, scheduler: Optional[Scheduler] = None) -> Throttled:
    """
    Create a throttled wrapper that invokes func at most once per limit
    milliseconds, dropping calls in between.
    """
    return Throttled(func, limit, scheduler=scheduler)
