"""Stream writer with optional ANSI colors"""

import os
import sys
from typing import IO, Any, Optional, Union

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.writers.base_writer import BaseWriter

_STANDARD_STREAMS = {
    "stdout": lambda: sys.stdout,
    "stderr": lambda: sys.stderr,
}


class StreamWriter(BaseWriter):
    """Write formatted entries to a stream or a file."""

    def __init__(
        self,
        stream: Optional[Union[IO, str]] = None,
        mode: str = "a",
        encoding: str = "utf-8",
        colored: bool = False,
        filters: Any = None,
        formatter: Any = None
    ):
        """
        Initialize stream writer.

        Args:
            stream: Output stream, "stdout", "stderr" or a file path
                (default: sys.stderr)
            mode: File open mode when stream is a path (default: 'a')
            encoding: File encoding when stream is a path
            colored: Use ANSI color codes
            filters: Filters to attach (see BaseWriter)
            formatter: Log formatter (default: uses entry's __str__)

        Raises:
            InvalidArgumentError: If stream is not writable or mode is not
                a write mode
        """
        super().__init__(filters=filters, formatter=formatter)
        self.colored = colored
        self._owns_stream = False

        if stream is None:
            stream = sys.stderr
        elif isinstance(stream, str) and stream.lower() in _STANDARD_STREAMS:
            stream = _STANDARD_STREAMS[stream.lower()]()
        elif isinstance(stream, (str, os.PathLike)):
            if not set(mode) & set("awx"):
                raise InvalidArgumentError(
                    f"Mode must allow writing; received {mode!r}"
                )
            stream = open(stream, mode, encoding=encoding)
            self._owns_stream = True

        if not callable(getattr(stream, "write", None)):
            raise InvalidArgumentError(
                f"stream must be writable; received {type(stream).__name__}"
            )
        self.stream = stream

    def write(self, entry: LogEntry) -> None:
        """Write log entry to the stream."""
        msg = self.format(entry)

        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"

        self.stream.write(msg + "\n")

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def shutdown(self) -> None:
        """Close the stream if this writer opened it."""
        if self._owns_stream and not self.stream.closed:
            self.stream.close()
