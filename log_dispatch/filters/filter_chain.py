"""
Filter chain

Ordered set of filters guarding a single writer
"""

from typing import Any, Iterator, List, Mapping, Optional

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.filters.base_filter import BaseFilter
from log_dispatch.filters.filter_plugin_manager import FilterPluginManager


class FilterChain:
    """
    Conjunction of filters evaluated in attachment order.

    An empty chain accepts everything. Evaluation stops at the first
    filter that rejects the entry.
    """

    def __init__(self, plugins: Optional[FilterPluginManager] = None):
        self._filters: List[BaseFilter] = []
        self._plugins = plugins

    @property
    def plugins(self) -> FilterPluginManager:
        """Filter plugin manager used to resolve filter names."""
        if self._plugins is None:
            self._plugins = FilterPluginManager()
        return self._plugins

    @plugins.setter
    def plugins(self, plugins: FilterPluginManager) -> None:
        self._plugins = plugins

    def add_filter(
        self,
        log_filter: Any,
        options: Optional[Mapping[str, Any]] = None
    ) -> BaseFilter:
        """
        Attach a filter.

        Args:
            log_filter: BaseFilter instance or registered filter name
            options: Options for a filter given by name

        Returns:
            The attached filter instance

        Raises:
            UnknownPluginError: If the filter name is not registered
            InvalidArgumentError: If log_filter is neither a filter nor a name
        """
        resolved = self.plugins.resolve(log_filter, options)
        self._filters.append(resolved)
        return resolved

    def accept(self, entry: LogEntry) -> bool:
        """Return True if every filter accepts the entry."""
        return all(f.accept(entry) for f in self._filters)

    def clear(self) -> None:
        """Detach all filters."""
        self._filters.clear()

    def __iter__(self) -> Iterator[BaseFilter]:
        return iter(list(self._filters))

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        """String representation."""
        return f"FilterChain({self._filters!r})"
