"""Mock writer keeping entries in memory"""

from typing import Any, List

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.writers.base_writer import BaseWriter


class MockWriter(BaseWriter):
    """Collect written entries in ``events``."""

    def __init__(self, filters: Any = None, formatter: Any = None):
        super().__init__(filters=filters, formatter=formatter)
        self.events: List[LogEntry] = []
        self.is_shutdown = False

    def write(self, entry: LogEntry) -> None:
        self.events.append(entry)

    def clear(self) -> None:
        self.events.clear()

    def shutdown(self) -> None:
        self.is_shutdown = True
