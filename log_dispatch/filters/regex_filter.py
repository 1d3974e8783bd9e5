"""
Regex filter

Filters log entries based on message content matching
"""

import re
from typing import Pattern, Union

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.filters.base_filter import BaseFilter

# "/pattern/flags" as written for PCRE
_DELIMITED = re.compile(r"^/(?P<body>.*)/(?P<flags>[imsx]*)$", re.DOTALL)

_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


def compile_pattern(regex: Union[str, Pattern]) -> Pattern:
    """
    Compile a pattern, accepting "/.../flags" delimited syntax.

    Raises:
        InvalidArgumentError: If the pattern is not a valid regular expression
    """
    if isinstance(regex, re.Pattern):
        return regex
    if not isinstance(regex, str):
        raise InvalidArgumentError(
            f"regex must be a string or compiled pattern; "
            f"received {type(regex).__name__}"
        )

    flags = 0
    match = _DELIMITED.match(regex)
    if match:
        regex = match.group("body")
        for flag in match.group("flags"):
            flags |= _FLAGS[flag]

    try:
        return re.compile(regex, flags)
    except re.error as exc:
        raise InvalidArgumentError(f"Invalid regex {regex!r}: {exc}") from exc


class RegexFilter(BaseFilter):
    """
    Filter log entries whose message matches a regex.

    The pattern is searched anywhere in the message.
    """

    def __init__(self, regex: Union[str, Pattern]):
        """
        Initialize regex filter.

        Args:
            regex: Regular expression (string, "/pattern/flags" string or
                compiled Pattern)

        Example:
            # Only log messages containing digits
            filter = RegexFilter(r"[0-9]+")

            # Case-insensitive matching
            filter = RegexFilter("/warning/i")
        """
        self.regex = compile_pattern(regex)

    def accept(self, entry: LogEntry) -> bool:
        """
        Check if entry message matches the pattern.

        Args:
            entry: Log entry to check

        Returns:
            True if the message matches, False otherwise
        """
        return self.regex.search(entry.message) is not None

    def __repr__(self) -> str:
        """String representation."""
        return f"RegexFilter(regex='{self.regex.pattern}')"
