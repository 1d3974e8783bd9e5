"""Registry of built-in and user-supplied writers"""

from log_dispatch.core.plugin_manager import PluginManager
from log_dispatch.writers.base_writer import BaseWriter
from log_dispatch.writers.mock_writer import MockWriter
from log_dispatch.writers.null_writer import NullWriter
from log_dispatch.writers.stream_writer import StreamWriter


class WriterPluginManager(PluginManager):
    """Plugin manager for Writer plugins."""

    capability = BaseWriter
    kind = "Writer"

    def _register_defaults(self) -> None:
        self.register_class("mock", MockWriter)
        self.register_class("null", NullWriter)
        self.register_class("noop", NullWriter)
        self.register_class("stream", StreamWriter)
