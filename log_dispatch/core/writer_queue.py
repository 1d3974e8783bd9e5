"""
Priority-ordered writer queue

Writers are served by descending priority; writers sharing a priority
keep their insertion order.
"""

from itertools import count
from typing import Any, Iterable, Iterator, List, Tuple

from log_dispatch.exceptions import InvalidArgumentError

DEFAULT_PRIORITY = 1


class WriterQueue:
    """
    Ordered collection of (priority, writer) pairs.

    Each entry carries a sequence number from a monotonically increasing
    counter, so the sort key ``(-priority, sequence)`` gives a stable
    order for equal priorities. Iteration works on a snapshot and leaves
    the queue untouched.

    Example:
        queue = WriterQueue()
        queue.add(file_writer, 1)
        queue.add(console_writer, 2)
        list(queue)  # [console_writer, file_writer]
    """

    def __init__(self, writers: Iterable[Tuple[Any, int]] = ()):
        """
        Initialize writer queue.

        Args:
            writers: Optional (writer, priority) pairs to insert in order
        """
        self._entries: List[Tuple[int, int, Any]] = []
        self._sequence = count()
        for writer, priority in writers:
            self.add(writer, priority)

    def add(self, writer: Any, priority: int = DEFAULT_PRIORITY) -> None:
        """
        Insert a writer.

        Args:
            writer: Writer instance
            priority: Higher priorities are served first

        Raises:
            InvalidArgumentError: If priority is not an integer
        """
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise InvalidArgumentError(
                f"priority must be int; received {type(priority).__name__}"
            )
        self._entries.append((-priority, next(self._sequence), writer))
        self._entries.sort(key=lambda item: item[:2])

    def set_all(self, writers: Any) -> None:
        """
        Replace the queue contents.

        Dropped writers are neither flushed nor shut down.

        Args:
            writers: Another WriterQueue or an iterable of
                (writer, priority) pairs
        """
        pairs = writers.items() if isinstance(writers, WriterQueue) else list(writers)
        fresh = WriterQueue(pairs)
        self._entries = fresh._entries
        self._sequence = fresh._sequence

    def remove(self, writer: Any) -> bool:
        """
        Remove every occurrence of a writer.

        Returns:
            True if the writer was queued, False otherwise
        """
        before = len(self._entries)
        self._entries = [e for e in self._entries if e[2] is not writer]
        return len(self._entries) != before

    def iterate_descending(self) -> List[Any]:
        """Return writers in dispatch order."""
        return [writer for _, _, writer in self._entries]

    def items(self) -> List[Tuple[Any, int]]:
        """Return (writer, priority) pairs in dispatch order."""
        return [(writer, -neg_priority) for neg_priority, _, writer in self._entries]

    def is_empty(self) -> bool:
        """Check whether the queue holds no writer."""
        return not self._entries

    def clear(self) -> None:
        """Remove all writers."""
        self._entries = []

    def __iter__(self) -> Iterator[Any]:
        return iter(self.iterate_descending())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, writer: Any) -> bool:
        return any(e[2] is writer for e in self._entries)

    def __repr__(self) -> str:
        """String representation."""
        pairs = ", ".join(
            f"{type(writer).__name__}:{priority}" for writer, priority in self.items()
        )
        return f"WriterQueue([{pairs}])"
