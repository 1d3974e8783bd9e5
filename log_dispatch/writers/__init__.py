"""Writers module - Log output handlers"""

from log_dispatch.writers.base_writer import BaseWriter
from log_dispatch.writers.mock_writer import MockWriter
from log_dispatch.writers.null_writer import NullWriter
from log_dispatch.writers.stream_writer import StreamWriter
from log_dispatch.writers.writer_plugin_manager import WriterPluginManager

__all__ = [
    "BaseWriter",
    "MockWriter",
    "NullWriter",
    "StreamWriter",
    "WriterPluginManager",
]
