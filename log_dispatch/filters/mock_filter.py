"""Mock filter recording every entry it sees"""

from typing import List

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.filters.base_filter import BaseFilter


class MockFilter(BaseFilter):
    """Accept every entry and keep it in ``events``."""

    def __init__(self):
        self.events: List[LogEntry] = []

    def accept(self, entry: LogEntry) -> bool:
        self.events.append(entry)
        return True
