"""Logger builder pattern"""

from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Tuple

from log_dispatch.core.logger import Logger
from log_dispatch.core.logger_config import LoggerConfig
from log_dispatch.writers.writer_plugin_manager import WriterPluginManager


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._writers: List[Tuple[Any, Optional[int], Optional[Mapping[str, Any]]]] = []
        self._writer_plugins: Optional[WriterPluginManager] = None
        self._clock: Optional[Callable[[], datetime]] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_default_priority(self, priority: int) -> "LoggerBuilder":
        """Set the priority given to writers added without one."""
        self._config.default_priority = priority
        return self

    def with_console(
        self,
        colored: bool = True,
        priority: Optional[int] = None,
        formatter: Any = None
    ) -> "LoggerBuilder":
        """Enable output to stderr."""
        options = {"colored": colored}
        if formatter is not None:
            options["formatter"] = formatter
        return self.add_writer("stream", priority, options)

    def with_file(
        self,
        filepath: str,
        priority: Optional[int] = None,
        formatter: Any = None
    ) -> "LoggerBuilder":
        """Enable output to a file (appending)."""
        options = {"stream": filepath}
        if formatter is not None:
            options["formatter"] = formatter
        return self.add_writer("stream", priority, options)

    def with_writer_plugins(self, plugins: WriterPluginManager) -> "LoggerBuilder":
        """Use a custom writer plugin manager."""
        self._writer_plugins = plugins
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Use a custom timestamp source."""
        self._clock = clock
        return self

    def with_error_handler(self, enabled: bool = True) -> "LoggerBuilder":
        """
        Log warnings through the built logger.

        Only one logger can hold the warning bridge at a time; if another
        logger already holds it the built logger is not registered.
        """
        self._config.register_error_handler = enabled
        return self

    def with_exception_handler(self, enabled: bool = True) -> "LoggerBuilder":
        """Log uncaught exceptions through the built logger."""
        self._config.register_exception_handler = enabled
        return self

    def add_writer(
        self,
        writer: Any,
        priority: Optional[int] = None,
        options: Optional[Mapping[str, Any]] = None
    ) -> "LoggerBuilder":
        """
        Add a writer.

        Args:
            writer: Writer instance or registered writer name
            priority: Higher priorities are served first
            options: Options for a writer given by name

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_name("app")
                .add_writer("stream", 2, {"stream": "stdout"})
                .add_writer(MockWriter().add_filter("priority", {"priority": "err"}))
                .build())
        """
        self._writers.append((writer, priority, options))
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(
            self._config,
            writer_plugins=self._writer_plugins,
            clock=self._clock,
        )

        for writer, priority, options in self._writers:
            logger.add_writer(writer, priority, options)

        return logger
