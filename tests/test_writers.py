"""Tests for writers and formatters"""

import io
import json
from datetime import datetime

import pytest

from log_dispatch import InvalidArgumentError, LogLevel
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.filters import PriorityFilter, SuppressFilter
from log_dispatch.formatters import JSONFormatter, SimpleFormatter, get_formatter
from log_dispatch.writers import MockWriter, NullWriter, StreamWriter

STAMP = datetime(2024, 1, 2, 3, 4, 5)


def make_entry(message="hello", level=LogLevel.INFO, extra=None):
    return LogEntry(level=level, message=message, timestamp=STAMP, extra=extra or {})


class TestBaseWriterFilters:
    """Test filter handling shared by all writers."""

    def test_no_filters_accepts(self):
        assert MockWriter().accept(make_entry()) is True

    def test_add_filter_chains(self):
        writer = MockWriter()
        assert writer.add_filter(SuppressFilter(True)) is writer
        assert writer.accept(make_entry()) is False

    def test_level_shortcut(self):
        writer = MockWriter(filters=LogLevel.ERR)
        assert isinstance(list(writer.filters)[0], PriorityFilter)
        assert writer.accept(make_entry(level=LogLevel.WARN)) is False
        assert writer.accept(make_entry(level=LogLevel.CRIT)) is True

    def test_filter_list(self):
        writer = NullWriter(filters=["mock", {"name": "regex", "options": {"regex": "^h"}}])
        assert len(writer.filters) == 2
        assert writer.accept(make_entry("hello")) is True
        assert writer.accept(make_entry("bye")) is False

    def test_filter_spec_without_name(self):
        with pytest.raises(InvalidArgumentError):
            MockWriter(filters=[{"options": {}}])

    def test_invalid_filters_value(self):
        with pytest.raises(InvalidArgumentError):
            MockWriter(filters=object())

    def test_mock_writer_records(self):
        writer = MockWriter()
        entry = make_entry()
        writer.write(entry)
        assert writer.events == [entry]
        writer.clear()
        assert writer.events == []


class TestStreamWriter:
    """Test StreamWriter."""

    def test_write_to_stream(self):
        stream = io.StringIO()
        writer = StreamWriter(stream, formatter=SimpleFormatter("{level_name}: {message}"))
        writer.write(make_entry())
        assert stream.getvalue() == "INFO: hello\n"

    def test_default_format(self):
        stream = io.StringIO()
        StreamWriter(stream).write(make_entry())
        assert stream.getvalue() == "[2024-01-02 03:04:05.000] [INFO  ] hello\n"

    def test_colored(self):
        stream = io.StringIO()
        StreamWriter(stream, colored=True).write(make_entry(level=LogLevel.ERR))
        output = stream.getvalue()
        assert output.startswith(LogLevel.ERR.color_code)
        assert LogLevel.ERR.reset_code in output

    def test_formatter_by_name(self):
        stream = io.StringIO()
        StreamWriter(stream, formatter="json").write(make_entry())
        assert json.loads(stream.getvalue())["message"] == "hello"

    def test_stdout(self, capsys):
        writer = StreamWriter("stdout")
        writer.write(make_entry())
        assert "hello" in capsys.readouterr().out

    def test_file_path(self, tmp_path):
        path = tmp_path / "logs.txt"
        writer = StreamWriter(path)
        writer.write(make_entry("first"))
        writer.flush()
        writer.shutdown()
        writer = StreamWriter(str(path))
        writer.write(make_entry("second"))
        writer.shutdown()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert [line.split()[-1] for line in lines] == ["first", "second"]

    def test_read_mode_rejected(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            StreamWriter(tmp_path / "x.log", mode="r")

    def test_unwritable_stream(self):
        with pytest.raises(InvalidArgumentError):
            StreamWriter(42)

    def test_shutdown_leaves_foreign_stream_open(self):
        stream = io.StringIO()
        StreamWriter(stream).shutdown()
        assert not stream.closed

    def test_write_errors_propagate(self):
        stream = io.StringIO()
        writer = StreamWriter(stream)
        stream.close()
        with pytest.raises(ValueError):
            writer.write(make_entry())


class TestFormatters:
    """Test formatter output."""

    def test_simple_default(self):
        assert SimpleFormatter().format(make_entry()) == "2024-01-02T03:04:05 INFO (6): hello"

    def test_simple_with_extra(self):
        output = SimpleFormatter().format(make_entry(extra={"id": 42}))
        assert output == '2024-01-02T03:04:05 INFO (6): hello {"id": 42}'

    def test_simple_keeps_message_whitespace(self):
        assert SimpleFormatter().format(make_entry("hello  ")) == "2024-01-02T03:04:05 INFO (6): hello  "
        assert SimpleFormatter("{message}").format(make_entry("tab\t")) == "tab\t"

    def test_simple_invalid_template(self):
        with pytest.raises(InvalidArgumentError):
            SimpleFormatter("{thread} {message}")

    def test_json(self):
        data = json.loads(JSONFormatter().format(make_entry(extra={"when": STAMP})))
        assert data["level"] == 6
        assert data["level_name"] == "INFO"
        assert data["message"] == "hello"
        assert data["extra"] == {"when": str(STAMP)}

    def test_json_without_extra(self):
        data = json.loads(JSONFormatter(include_extra=False).format(make_entry(extra={"id": 1})))
        assert "extra" not in data

    def test_get_formatter(self):
        formatter = JSONFormatter()
        assert get_formatter(formatter) is formatter
        assert isinstance(get_formatter("SIMPLE"), SimpleFormatter)

    @pytest.mark.parametrize("value", ["xml", 3, None])
    def test_get_formatter_invalid(self, value):
        with pytest.raises(InvalidArgumentError):
            get_formatter(value)
