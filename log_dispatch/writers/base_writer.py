"""
Base writer interface
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.filters.base_filter import BaseFilter
from log_dispatch.filters.filter_chain import FilterChain
from log_dispatch.formatters import BaseFormatter, get_formatter


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    A writer owns a FilterChain; the logger asks ``accept()`` before it
    calls ``write()``. Writers may also carry a formatter.
    """

    def __init__(self, filters: Any = None, formatter: Any = None):
        """
        Initialize writer.

        Args:
            filters: Filters to attach. A single filter, a level (shortcut
                for a priority filter), or a list whose items are filter
                instances, filter names or {"name": ..., "options": ...}
                mappings
            formatter: BaseFormatter instance or formatter name
        """
        self._filters = FilterChain()
        self.formatter: Optional[BaseFormatter] = None
        if formatter is not None:
            self.set_formatter(formatter)
        if filters is not None:
            self._add_filters(filters)

    def _add_filters(self, filters: Any) -> None:
        if isinstance(filters, (BaseFilter, str, int, Mapping)):
            filters = [filters]
        if not isinstance(filters, Iterable):
            raise InvalidArgumentError(
                f"filters must be a filter or a list of filters; "
                f"received {type(filters).__name__}"
            )
        for spec in filters:
            if isinstance(spec, int) and not isinstance(spec, bool):
                self.add_filter("priority", {"priority": spec})
            elif isinstance(spec, Mapping):
                if "name" not in spec:
                    raise InvalidArgumentError(
                        "filter specification requires a 'name' key"
                    )
                self.add_filter(spec["name"], spec.get("options"))
            else:
                self.add_filter(spec)

    @property
    def filters(self) -> FilterChain:
        """The writer's filter chain."""
        return self._filters

    def add_filter(
        self,
        log_filter: Any,
        options: Optional[Mapping[str, Any]] = None
    ) -> "BaseWriter":
        """
        Attach a filter to this writer.

        Args:
            log_filter: BaseFilter instance or registered filter name
            options: Options for a filter given by name

        Returns:
            Self for method chaining
        """
        self._filters.add_filter(log_filter, options)
        return self

    def accept(self, entry: LogEntry) -> bool:
        """Return True if the filter chain lets entry through."""
        return self._filters.accept(entry)

    def set_formatter(self, formatter: Any) -> "BaseWriter":
        """Set the formatter (instance or name)."""
        self.formatter = get_formatter(formatter)
        return self

    def format(self, entry: LogEntry) -> str:
        """Format entry with the formatter, or str() without one."""
        if self.formatter:
            return self.formatter.format(entry)
        return str(entry)

    @abstractmethod
    def write(self, entry: LogEntry) -> None:
        """
        Write a log entry.

        Errors are raised to the caller.
        """
        pass

    def flush(self) -> None:
        """Flush buffered output."""
        pass

    def shutdown(self) -> None:
        """Release resources held by the writer."""
        pass
