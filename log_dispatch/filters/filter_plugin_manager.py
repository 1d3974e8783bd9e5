"""Registry of built-in and user-supplied filters"""

from log_dispatch.core.plugin_manager import PluginManager
from log_dispatch.filters.base_filter import BaseFilter
from log_dispatch.filters.callback_filter import CallbackFilter
from log_dispatch.filters.mock_filter import MockFilter
from log_dispatch.filters.priority_filter import PriorityFilter
from log_dispatch.filters.regex_filter import RegexFilter
from log_dispatch.filters.suppress_filter import SuppressFilter
from log_dispatch.filters.validator_filter import ValidatorFilter


class FilterPluginManager(PluginManager):
    """Plugin manager for Filter plugins."""

    capability = BaseFilter
    kind = "Filter"

    def _register_defaults(self) -> None:
        self.register_class("mock", MockFilter)
        self.register_class("priority", PriorityFilter)
        self.register_class("regex", RegexFilter)
        self.register_class("validator", ValidatorFilter)
        self.register_class("suppress", SuppressFilter)
        self.register_class("callback", CallbackFilter)
