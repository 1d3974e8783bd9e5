"""
JSON formatter for structured logging

Formats log entries as JSON objects
"""

import json
from typing import Optional

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_extra: bool = True,
        indent: Optional[int] = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_extra: Include extra fields in output
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_extra = include_extra
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        log_dict = {
            "timestamp": entry.timestamp.isoformat(),
            "level": int(entry.level),
            "level_name": entry.level.name,
            "message": entry.message,
        }

        if entry.logger_name:
            log_dict["logger"] = entry.logger_name

        # Values without a JSON form are stringified
        if self.include_extra and entry.extra:
            log_dict["extra"] = entry.extra

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
