"""
Main Logger class - synchronous dispatch of log entries to writers
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from log_dispatch.core.error_handler import ErrorHandler, ExceptionHandler
from log_dispatch.core.event_builder import EventBuilder
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.logger_config import LoggerConfig
from log_dispatch.core.writer_queue import WriterQueue
from log_dispatch.exceptions import InvalidArgumentError, LoggerRuntimeError
from log_dispatch.writers.base_writer import BaseWriter
from log_dispatch.writers.writer_plugin_manager import WriterPluginManager


class Logger:
    """
    Logger dispatching each entry to its writers by descending priority.

    Delivery is synchronous: log() returns once every accepting writer
    has written the entry. A writer error propagates to the caller and
    the remaining writers are skipped for that call.

    Example:
        logger = Logger()
        logger.add_writer("stream", priority=2)
        logger.add_writer(MockWriter())
        logger.info("Application started", {"pid": 4242})
    """

    EMERG = LogLevel.EMERG
    ALERT = LogLevel.ALERT
    CRIT = LogLevel.CRIT
    ERR = LogLevel.ERR
    WARN = LogLevel.WARN
    NOTICE = LogLevel.NOTICE
    INFO = LogLevel.INFO
    DEBUG = LogLevel.DEBUG

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        writer_plugins: Optional[WriterPluginManager] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize logger.

        Args:
            config: Logger configuration (default: LoggerConfig.default())
            writer_plugins: Plugin manager used to resolve writer names
            clock: Timestamp source for entries (default: datetime.now)
        """
        self._config = config or LoggerConfig.default()
        self._writers = WriterQueue()
        self._writer_plugins: Optional[WriterPluginManager] = None
        if writer_plugins is not None:
            self.writer_plugin_manager = writer_plugins
        self._event_builder = EventBuilder(clock=clock, logger_name=self._config.name)

        self._apply_config()

    def _apply_config(self) -> None:
        for spec in self._config.writers:
            writer = self.writer_plugin(spec.name, spec.options)
            for filter_spec in spec.filters:
                writer.add_filter(filter_spec.name, filter_spec.options)
            self.add_writer(writer, spec.priority)

        if self._config.register_error_handler:
            self.register_error_handler(self)
        if self._config.register_exception_handler:
            self.register_exception_handler(self)

    @property
    def name(self) -> str:
        """Logger name stamped on every entry."""
        return self._config.name

    @property
    def writer_plugin_manager(self) -> WriterPluginManager:
        """Plugin manager used to resolve writer names."""
        if self._writer_plugins is None:
            self._writer_plugins = WriterPluginManager()
        return self._writer_plugins

    @writer_plugin_manager.setter
    def writer_plugin_manager(self, plugins: Any) -> None:
        """
        Set the writer plugin manager.

        Args:
            plugins: WriterPluginManager instance, or a subclass of it
                to instantiate

        Raises:
            InvalidArgumentError: For anything else
        """
        if isinstance(plugins, type) and issubclass(plugins, WriterPluginManager):
            plugins = plugins()
        if not isinstance(plugins, WriterPluginManager):
            raise InvalidArgumentError(
                "Writer plugin manager must extend WriterPluginManager; "
                f"received {plugins!r}"
            )
        self._writer_plugins = plugins

    def writer_plugin(
        self,
        name: str,
        options: Optional[Mapping[str, Any]] = None
    ) -> BaseWriter:
        """
        Build a writer from its plugin name.

        Raises:
            UnknownPluginError: If name is not registered
            InvalidArgumentError: If options are malformed
        """
        return self.writer_plugin_manager.get(name, options)

    def add_writer(
        self,
        writer: Any,
        priority: Optional[int] = None,
        options: Optional[Mapping[str, Any]] = None
    ) -> "Logger":
        """
        Add a log writer.

        Args:
            writer: BaseWriter instance or registered writer name
            priority: Higher priorities are served first
                (default: config.default_priority)
            options: Options for a writer given by name

        Returns:
            Self for method chaining

        Raises:
            UnknownPluginError: If the writer name is not registered
            InvalidArgumentError: If writer is neither a writer nor a name
        """
        writer = self.writer_plugin_manager.resolve(writer, options)
        if priority is None:
            priority = self._config.default_priority
        self._writers.add(writer, priority)
        return self

    def get_writers(self) -> WriterQueue:
        """Get the writer queue."""
        return self._writers

    def set_writers(self, writers: Any) -> "Logger":
        """
        Replace all writers.

        Args:
            writers: WriterQueue or iterable of (writer, priority) pairs

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If an item is not a writer
        """
        pairs = writers.items() if isinstance(writers, WriterQueue) else list(writers)
        for writer, _ in pairs:
            if not isinstance(writer, BaseWriter):
                raise InvalidArgumentError(
                    "Writer must implement Writer; "
                    f"received {type(writer).__name__}"
                )
        self._writers.set_all(pairs)
        return self

    def log(self, level: Any, message: Any, extra: Any = None) -> "Logger":
        """
        Log a message.

        Args:
            level: LogLevel, level number or level name
            message: String, sequence of strings or object implementing
                __str__
            extra: Mapping or key/value container of context attributes

        Returns:
            Self for method chaining

        Raises:
            LoggerRuntimeError: If no writer was added
            InvalidArgumentError: If an argument has an unsupported shape
        """
        if self._writers.is_empty():
            raise LoggerRuntimeError("No log writer specified")

        entry = self._event_builder.build(level, message, extra)
        self._dispatch(entry)
        return self

    def _dispatch(self, entry: LogEntry) -> None:
        for writer in self._writers.iterate_descending():
            if writer.accept(entry):
                writer.write(entry)

    def emerg(self, message: Any, extra: Any = None) -> "Logger":
        """Log emergency message."""
        return self.log(LogLevel.EMERG, message, extra)

    def alert(self, message: Any, extra: Any = None) -> "Logger":
        """Log alert message."""
        return self.log(LogLevel.ALERT, message, extra)

    def crit(self, message: Any, extra: Any = None) -> "Logger":
        """Log critical message."""
        return self.log(LogLevel.CRIT, message, extra)

    def err(self, message: Any, extra: Any = None) -> "Logger":
        """Log error message."""
        return self.log(LogLevel.ERR, message, extra)

    def warn(self, message: Any, extra: Any = None) -> "Logger":
        """Log warning message."""
        return self.log(LogLevel.WARN, message, extra)

    def notice(self, message: Any, extra: Any = None) -> "Logger":
        """Log notice message."""
        return self.log(LogLevel.NOTICE, message, extra)

    def info(self, message: Any, extra: Any = None) -> "Logger":
        """Log info message."""
        return self.log(LogLevel.INFO, message, extra)

    def debug(self, message: Any, extra: Any = None) -> "Logger":
        """Log debug message."""
        return self.log(LogLevel.DEBUG, message, extra)

    def flush(self) -> None:
        """Flush all writers."""
        for writer in self._writers.iterate_descending():
            writer.flush()

    def shutdown(self) -> None:
        """Shut down all writers."""
        for writer in self._writers.iterate_descending():
            writer.shutdown()

    @staticmethod
    def register_error_handler(logger: "Logger") -> bool:
        """
        Log warnings through logger.

        Returns:
            True if installed, False if a logger is already registered
        """
        return ErrorHandler.register(logger)

    @staticmethod
    def unregister_error_handler() -> None:
        """Restore the warning handler active before registration."""
        ErrorHandler.unregister()

    @staticmethod
    def register_exception_handler(logger: "Logger") -> bool:
        """
        Log uncaught exceptions through logger.

        Returns:
            True if installed, False if a logger is already registered
        """
        return ExceptionHandler.register(logger)

    @staticmethod
    def unregister_exception_handler() -> None:
        """Restore the exception hook active before registration."""
        ExceptionHandler.unregister()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name='{self.name}', writers={self._writers!r})"
