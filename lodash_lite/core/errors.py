"""
Exceptions raised by lodash_lite.

**Conceptual**: The data helpers never raise for ordinary bad input; they
degrade to a default, an empty container, or False. Exceptions are reserved
for misuse of the supporting machinery (schedulers, configuration), where a
silent fallback would hide a programming error.
"""


class LodashLiteError(Exception):
    """
    Base exception for lodash_lite errors.

    Callers can catch LodashLiteError to handle every library-specific error,
    or catch a subclass for fine-grained handling.
    """
    pass


class SchedulerError(LodashLiteError):
    """
    Raised when a timer scheduler is used incorrectly.

    **Examples**: AsyncioScheduler.call_later() outside a running event loop,
    or ManualScheduler.advance() with a negative duration.
    """
    pass
