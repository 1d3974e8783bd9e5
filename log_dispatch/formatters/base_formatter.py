"""
Base formatter interface
"""

from abc import ABC, abstractmethod

from log_dispatch.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Turns a LogEntry into the line a writer emits.

    Writers without a formatter fall back to ``str(entry)``.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """Render entry as a single string (no trailing newline)."""
        pass

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)
