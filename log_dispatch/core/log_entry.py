"""
Log entry data structure

One immutable record per log call.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from log_dispatch.core.log_level import LogLevel


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Built once by the EventBuilder and handed, unchanged, to every filter
    and writer during a single dispatch pass. ``extra`` is always a plain
    dict keyed by strings.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    extra: Dict[str, Any] = field(default_factory=dict)
    logger_name: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            raise TypeError("message must be str")
        if not isinstance(self.extra, dict):
            raise TypeError("extra must be dict")

    @property
    def level_name(self) -> str:
        """Name of the entry's level."""
        return self.level.name

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": int(self.level),
            "level_name": self.level.name,
            "message": self.message,
            "extra": dict(self.extra),
            "logger_name": self.logger_name,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:6}] "
            f"{self.message}"
        )
