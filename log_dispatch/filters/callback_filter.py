"""
Callback-based filter

Filters log entries using custom callback functions
"""

from typing import Callable

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter log entries using a custom callback function.

    Provides maximum flexibility for filtering logic.
    """

    def __init__(self, callback: Callable[[LogEntry], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes LogEntry and returns bool.
                     Should return True to log the entry, False to discard it.

        Example:
            # Filter based on extra fields
            def has_user_id(entry):
                return "user_id" in entry.extra

            filter = CallbackFilter(has_user_id)

            # Complex condition
            def complex_filter(entry):
                return (entry.level.is_at_least(LogLevel.WARN) or
                        "critical" in entry.message.lower())

            filter = CallbackFilter(complex_filter)
        """
        if not callable(callback):
            raise InvalidArgumentError("callback must be callable")

        self.callback = callback

    def accept(self, entry: LogEntry) -> bool:
        """
        Use callback to determine if entry should be logged.

        Args:
            entry: Log entry to check

        Returns:
            Result of callback function

        Raises:
            Exception: If callback raises an exception, it's propagated
        """
        return bool(self.callback(entry))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
