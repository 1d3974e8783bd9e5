"""
Event builder

Validates raw log call arguments and turns them into a LogEntry.
"""

from collections.abc import Mapping
from datetime import datetime
from numbers import Number
from typing import Any, Callable, Dict, List, Optional, Tuple

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.exceptions import InvalidArgumentError


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, Number))


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def normalize_message(message: Any) -> str:
    """
    Normalize a log message to a single string.

    Accepted shapes:
        - str, returned unchanged
        - numbers (including bool), converted with str()
        - list or tuple of scalars or string-convertible objects, joined
          with ", "
        - objects whose class defines its own __str__

    Raises:
        InvalidArgumentError: For any other shape, including None
    """
    if isinstance(message, str):
        return message
    if isinstance(message, Number):
        return str(message)
    if isinstance(message, (list, tuple)):
        parts = []
        for part in message:
            if not (_is_scalar(part) or _has_own_str(part)):
                raise InvalidArgumentError(
                    "Message sequence items must be scalars or string-"
                    f"convertible objects; received {type(part).__name__}"
                )
            parts.append(str(part))
        return ", ".join(parts)
    if _has_own_str(message):
        return str(message)
    raise InvalidArgumentError(
        "Message must be a string, a sequence of strings or an object "
        f"implementing __str__; received {type(message).__name__}"
    )


def _normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise InvalidArgumentError(
        f"Extra keys must be strings; received {type(key).__name__}"
    )


def _checked_pairs(items: Any, source: str) -> List[Tuple[Any, Any]]:
    try:
        pairs = list(items)
    except TypeError as exc:
        raise InvalidArgumentError(f"{source} must be iterable") from exc
    for pair in pairs:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise InvalidArgumentError(f"{source} must yield (key, value) pairs")
    return [tuple(pair) for pair in pairs]


def normalize_extra(extra: Any) -> Dict[str, Any]:
    """
    Normalize extra attributes to a fresh string-keyed dict.

    Accepted shapes:
        - None (no attributes)
        - any Mapping
        - any object exposing a callable items() (key/value container)
        - a list or tuple of (key, value) pairs

    Raises:
        InvalidArgumentError: For any other shape
    """
    if extra is None:
        return {}

    if isinstance(extra, Mapping):
        pairs = extra.items()
    elif not isinstance(extra, (str, bytes)) and callable(getattr(extra, "items", None)):
        pairs = _checked_pairs(extra.items(), "Extra items()")
    elif isinstance(extra, (list, tuple)):
        pairs = _checked_pairs(extra, "Extra sequences")
    else:
        raise InvalidArgumentError(
            "Extra must be a mapping or a key/value container; "
            f"received {type(extra).__name__}"
        )

    normalized: Dict[str, Any] = {}
    for key, value in pairs:
        name = _normalize_key(key)
        if name in normalized:
            raise InvalidArgumentError(f"Duplicate extra key: {name!r}")
        normalized[name] = value
    return normalized


class EventBuilder:
    """
    Build immutable LogEntry records from raw log call arguments.

    The clock is injectable so tests can pin timestamps.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        logger_name: str = ""
    ):
        self.clock = clock or datetime.now
        self.logger_name = logger_name

    def build(self, level: Any, message: Any, extra: Any = None) -> LogEntry:
        """
        Validate inputs and create a log entry.

        Args:
            level: LogLevel, level number or level name
            message: Message (see normalize_message)
            extra: Context attributes (see normalize_extra)

        Returns:
            New LogEntry

        Raises:
            InvalidArgumentError: If any argument has an unsupported shape
        """
        return LogEntry(
            level=LogLevel.coerce(level),
            message=normalize_message(message),
            timestamp=self.clock(),
            extra=normalize_extra(extra),
            logger_name=self.logger_name,
        )
