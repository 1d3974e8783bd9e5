"""
Base filter interface
"""

from abc import ABC, abstractmethod

from log_dispatch.core.log_entry import LogEntry


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Filters decide whether a writer receives a log entry. They may hold
    configuration but keep no state derived from the entries they see.
    """

    @abstractmethod
    def accept(self, entry: LogEntry) -> bool:
        """
        Determine if a log entry should be written.

        Args:
            entry: The log entry to filter

        Returns:
            True if the entry is accepted, False otherwise
        """
        pass

    def __call__(self, entry: LogEntry) -> bool:
        """Allow filters to be callable."""
        return self.accept(entry)
