"""
Priority filter

Filters log entries by comparing their level with a threshold
"""

import operator as _operator
from typing import Any, Optional

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.filters.base_filter import BaseFilter

_OPERATORS = {
    "<": _operator.lt,
    "lt": _operator.lt,
    "<=": _operator.le,
    "le": _operator.le,
    ">": _operator.gt,
    "gt": _operator.gt,
    ">=": _operator.ge,
    "ge": _operator.ge,
    "==": _operator.eq,
    "=": _operator.eq,
    "eq": _operator.eq,
    "!=": _operator.ne,
    "<>": _operator.ne,
    "ne": _operator.ne,
}


class PriorityFilter(BaseFilter):
    """
    Filter log entries by level.

    The comparison is ``entry.level <operator> priority`` on the numeric
    level values. With the default "<=" operator an entry passes when it
    is at least as severe as the threshold.
    """

    def __init__(self, priority: Any, operator: Optional[str] = None):
        """
        Initialize priority filter.

        Args:
            priority: Threshold as LogLevel, level number, level name or
                numeric string
            operator: Comparison operator (default "<=")

        Raises:
            InvalidArgumentError: If priority or operator is not valid

        Example:
            # Only log WARN and above
            filter = PriorityFilter(LogLevel.WARN)

            # Only log DEBUG entries
            filter = PriorityFilter("debug", operator="==")
        """
        if isinstance(priority, str) and priority.strip().isdigit():
            priority = int(priority)
        self.priority = LogLevel.coerce(priority)

        self.operator = operator or "<="
        if self.operator not in _OPERATORS:
            raise InvalidArgumentError(
                f"Unsupported comparison operator: {self.operator!r}"
            )
        self._compare = _OPERATORS[self.operator]

    def accept(self, entry: LogEntry) -> bool:
        """
        Compare the entry's level with the threshold.

        Args:
            entry: Log entry to check

        Returns:
            True if the comparison holds, False otherwise
        """
        return self._compare(int(entry.level), int(self.priority))

    def __repr__(self) -> str:
        """String representation."""
        return f"PriorityFilter(priority={self.priority}, operator='{self.operator}')"
