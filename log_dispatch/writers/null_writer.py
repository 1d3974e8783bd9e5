"""Writer that discards everything"""

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.writers.base_writer import BaseWriter


class NullWriter(BaseWriter):
    """Accept entries and drop them."""

    def write(self, entry: LogEntry) -> None:
        pass
