"""
Severity level enumeration

Levels follow the syslog ordering: a lower value is more severe.
"""

from enum import IntEnum
from typing import Any, Dict

from log_dispatch.exceptions import InvalidArgumentError


class LogLevel(IntEnum):
    """
    Log severity levels.

    EMERG is the most urgent, DEBUG the most verbose.
    """

    EMERG = 0       # System is unusable
    ALERT = 1       # Action must be taken immediately
    CRIT = 2        # Critical conditions
    ERR = 3         # Error conditions
    WARN = 4        # Warning conditions
    NOTICE = 5      # Normal but significant condition
    INFO = 6        # Informational messages
    DEBUG = 7       # Debug messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    def is_at_least(self, threshold: "LogLevel") -> bool:
        """
        Check whether this level is as severe as threshold or more.

        Args:
            threshold: Level to compare against

        Returns:
            True if this level is at or above threshold in severity
        """
        return self <= threshold

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            InvalidArgumentError: If level_str is not a known level
        """
        name = level_str.strip().upper()
        if name in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[name]
        raise InvalidArgumentError(f"Invalid log level: {level_str!r}")

    @classmethod
    def coerce(cls, value: Any) -> "LogLevel":
        """
        Convert a level, level number or level name to LogLevel.

        Raises:
            InvalidArgumentError: If value is not a defined level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Invalid log level: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidArgumentError(
                    f"Invalid log level: {value!r}; "
                    f"expected {int(cls.EMERG)}..{int(cls.DEBUG)}"
                ) from None
        if isinstance(value, str):
            return cls.from_string(value)
        raise InvalidArgumentError(
            f"Invalid log level type: {type(value).__name__}"
        )

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.EMERG: "\033[1;35m",   # Bold magenta
            LogLevel.ALERT: "\033[35m",     # Magenta
            LogLevel.CRIT: "\033[1;31m",    # Bold red
            LogLevel.ERR: "\033[31m",       # Red
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.NOTICE: "\033[34m",    # Blue
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.DEBUG: "\033[36m",     # Cyan
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Names (and common aliases) accepted by from_string
LEVEL_FROM_NAME: Dict[str, LogLevel] = {
    **{level.name: level for level in LogLevel},
    "EMERGENCY": LogLevel.EMERG,
    "CRITICAL": LogLevel.CRIT,
    "ERROR": LogLevel.ERR,
    "WARNING": LogLevel.WARN,
}
