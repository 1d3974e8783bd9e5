"""
Simple formatter with customizable template

Formats log entries using a template string with placeholders
"""

import json
from typing import Optional

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.formatters.base_formatter import BaseFormatter


class SimpleFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    Supports placeholders for all LogEntry fields.
    """

    DEFAULT_TEMPLATE = "{timestamp} {level_name} ({level}): {message} {extra}"

    def __init__(
        self,
        template: Optional[str] = None,
        timestamp_format: str = "%Y-%m-%dT%H:%M:%S%z"
    ):
        """
        Initialize simple formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Numeric level
                     - {level_name}: Level name
                     - {message}: Log message
                     - {extra}: Extra attributes as JSON (empty if none)
                     - {logger}: Logger name
            timestamp_format: strftime format for timestamps

        Raises:
            InvalidArgumentError: If template uses an unknown placeholder

        Example:
            # Default format
            formatter = SimpleFormatter()

            # Custom format
            formatter = SimpleFormatter("{level_name} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

        try:
            self.template.format(
                timestamp="", level=0, level_name="", message="",
                extra="", logger="",
            )
        except (KeyError, IndexError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Invalid formatter template {self.template!r}: {exc}"
            ) from exc

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        extra = json.dumps(entry.extra, default=str) if entry.extra else ""

        line = self.template.format(
            timestamp=entry.timestamp.strftime(self.timestamp_format),
            level=int(entry.level),
            level_name=entry.level.name,
            message=entry.message,
            extra=extra,
            logger=entry.logger_name,
        )
        # Only the separator left in front of an empty extra slot is dropped
        if not extra and self.template.endswith(" {extra}"):
            line = line[:-1]
        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"SimpleFormatter(template='{self.template}')"
