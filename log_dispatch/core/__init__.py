"""
Core module for the logging core

This module contains the fundamental classes:
- Logger: Dispatches entries to writers
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Severity level enumeration
- EventBuilder: Validation of raw log call arguments
- WriterQueue: Priority-ordered writer collection
- PluginManager: Name-to-plugin registry base
- ErrorHandler / ExceptionHandler: Warning and exception bridges
- LoggerConfig: Configuration management
"""

from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.event_builder import EventBuilder
from log_dispatch.core.writer_queue import WriterQueue, DEFAULT_PRIORITY
from log_dispatch.core.plugin_manager import PluginManager
from log_dispatch.core.error_handler import ErrorHandler, ExceptionHandler
from log_dispatch.core.logger_config import LoggerConfig, WriterSpec, FilterSpec
from log_dispatch.core.logger import Logger
from log_dispatch.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "EventBuilder",
    "WriterQueue",
    "DEFAULT_PRIORITY",
    "PluginManager",
    "ErrorHandler",
    "ExceptionHandler",
    "LoggerConfig",
    "WriterSpec",
    "FilterSpec",
]
