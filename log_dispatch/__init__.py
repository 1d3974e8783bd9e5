"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Log Dispatch - A synchronous structured-logging dispatch core
Routes log entries to prioritized writers through per-writer filter chains
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_dispatch.core.logger import Logger
from log_dispatch.core.logger_builder import LoggerBuilder
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.logger_config import LoggerConfig
from log_dispatch.core.writer_queue import WriterQueue
from log_dispatch.core.error_handler import ErrorHandler, ExceptionHandler
from log_dispatch.exceptions import (
    LoggerError,
    InvalidArgumentError,
    UnknownPluginError,
    LoggerRuntimeError,
)

# Import submodules (not all classes by default)
from log_dispatch import filters
from log_dispatch import formatters
from log_dispatch import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "WriterQueue",
    "ErrorHandler",
    "ExceptionHandler",
    "LoggerError",
    "InvalidArgumentError",
    "UnknownPluginError",
    "LoggerRuntimeError",
    "filters",
    "formatters",
    "writers",
]
