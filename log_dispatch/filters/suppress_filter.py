"""Suppress filter - switch a writer off without removing it"""

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.filters.base_filter import BaseFilter


class SuppressFilter(BaseFilter):
    """Reject every entry while suppressed."""

    def __init__(self, suppress: bool = False):
        self.suppressed = bool(suppress)

    def suppress(self, suppress: bool = True) -> None:
        """Turn suppression on or off."""
        self.suppressed = bool(suppress)

    def accept(self, entry: LogEntry) -> bool:
        return not self.suppressed

    def __repr__(self) -> str:
        """String representation."""
        return f"SuppressFilter(suppressed={self.suppressed})"
