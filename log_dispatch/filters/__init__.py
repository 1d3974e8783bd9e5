"""
Log filters module

Provides the filter chain and the built-in filter implementations.
"""

from log_dispatch.filters.base_filter import BaseFilter
from log_dispatch.filters.priority_filter import PriorityFilter
from log_dispatch.filters.regex_filter import RegexFilter
from log_dispatch.filters.validator_filter import ValidatorFilter
from log_dispatch.filters.callback_filter import CallbackFilter
from log_dispatch.filters.suppress_filter import SuppressFilter
from log_dispatch.filters.mock_filter import MockFilter
from log_dispatch.filters.filter_plugin_manager import FilterPluginManager
from log_dispatch.filters.filter_chain import FilterChain

__all__ = [
    "BaseFilter",
    "PriorityFilter",
    "RegexFilter",
    "ValidatorFilter",
    "CallbackFilter",
    "SuppressFilter",
    "MockFilter",
    "FilterPluginManager",
    "FilterChain",
]
