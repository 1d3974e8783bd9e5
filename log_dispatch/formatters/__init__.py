"""
Log formatters module

Provides formatter implementations used by writers.
"""

from typing import Any

from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.formatters.base_formatter import BaseFormatter
from log_dispatch.formatters.simple_formatter import SimpleFormatter
from log_dispatch.formatters.json_formatter import JSONFormatter

FORMATTERS = {
    "simple": SimpleFormatter,
    "json": JSONFormatter,
}


def get_formatter(formatter: Any) -> BaseFormatter:
    """
    Return formatter itself, or build the formatter registered under a name.

    Raises:
        InvalidArgumentError: If formatter is neither a formatter nor a
            known formatter name
    """
    if isinstance(formatter, BaseFormatter):
        return formatter
    if isinstance(formatter, str) and formatter.lower() in FORMATTERS:
        return FORMATTERS[formatter.lower()]()
    raise InvalidArgumentError(
        f"Formatter must implement BaseFormatter or be one of "
        f"{sorted(FORMATTERS)}; received {formatter!r}"
    )


__all__ = [
    "BaseFormatter",
    "SimpleFormatter",
    "JSONFormatter",
    "get_formatter",
]
