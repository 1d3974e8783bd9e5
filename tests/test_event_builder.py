"""Tests for event construction and validation"""

from collections import OrderedDict
from datetime import datetime
from types import MappingProxyType

import pytest

from log_dispatch import InvalidArgumentError, LogLevel
from log_dispatch.core.event_builder import (
    EventBuilder,
    normalize_extra,
    normalize_message,
)


class Named:
    """Object with its own string conversion."""

    def __str__(self):
        return "named-object"


class Attributes:
    """Key/value container that is not a Mapping."""

    def __init__(self, **data):
        self._data = data

    def items(self):
        return self._data.items()


class BadItems:
    """Container whose items() does not yield pairs."""

    def items(self):
        return [1, 2]


class TestNormalizeMessage:
    """Test message normalization."""

    def test_string(self):
        assert normalize_message("plain") == "plain"

    def test_single_element_list(self):
        assert normalize_message(["test"]) == "test"

    def test_sequence_is_joined(self):
        assert normalize_message(("a", 1, 2.5)) == "a, 1, 2.5"

    def test_scalars(self):
        assert normalize_message(42) == "42"
        assert normalize_message(True) == "True"

    def test_object_with_str(self):
        assert normalize_message(Named()) == "named-object"
        assert normalize_message([Named(), "x"]) == "named-object, x"

    def test_exception_message(self):
        assert normalize_message(ValueError("boom")) == "boom"

    @pytest.mark.parametrize("message", [
        None,
        object(),
        {"a": 1},
        {1, 2},
        [object()],
        [["nested"]],
        [None],
    ])
    def test_invalid(self, message):
        with pytest.raises(InvalidArgumentError):
            normalize_message(message)


class TestNormalizeExtra:
    """Test extra attribute normalization."""

    def test_none_is_empty(self):
        assert normalize_extra(None) == {}

    def test_mapping_copied(self):
        data = {"user": "foo", "ip": "127.0.0.1"}
        extra = normalize_extra(data)
        assert extra == data
        assert extra is not data

    @pytest.mark.parametrize("container", [
        OrderedDict([("id", 42)]),
        MappingProxyType({"id": 42}),
        Attributes(id=42),
        [("id", 42)],
        (("id", 42),),
    ])
    def test_containers_become_dict(self, container):
        extra = normalize_extra(container)
        assert type(extra) is dict
        assert extra == {"id": 42}

    def test_int_keys_are_stringified(self):
        assert normalize_extra({0: "a"}) == {"0": "a"}

    @pytest.mark.parametrize("extra", [
        True,
        10,
        "invalid",
        b"bytes",
        object(),
        ["valid"],
        [("a", 1, 2)],
        {1.5: "x"},
        {("a",): 1},
        BadItems(),
    ])
    def test_invalid(self, extra):
        with pytest.raises(InvalidArgumentError):
            normalize_extra(extra)

    @pytest.mark.parametrize("extra", [
        {0: "a", "0": "b"},
        [("1", "a"), (1, "b")],
        [("id", 1), ("id", 2)],
    ])
    def test_colliding_keys_rejected(self, extra):
        with pytest.raises(InvalidArgumentError, match="Duplicate"):
            normalize_extra(extra)


class TestEventBuilder:
    """Test EventBuilder."""

    def test_build(self):
        stamp = datetime(2024, 5, 6, 7, 8, 9)
        builder = EventBuilder(clock=lambda: stamp, logger_name="app")
        entry = builder.build(LogLevel.ERR, ["disk", "full"], {"id": 42})

        assert entry.level is LogLevel.ERR
        assert entry.message == "disk, full"
        assert entry.extra == {"id": 42}
        assert entry.timestamp == stamp
        assert entry.logger_name == "app"

    def test_level_by_number_and_name(self):
        builder = EventBuilder()
        assert builder.build(6, "m").level is LogLevel.INFO
        assert builder.build("warning", "m").level is LogLevel.WARN

    def test_invalid_level(self):
        with pytest.raises(InvalidArgumentError):
            EventBuilder().build(99, "m")

    def test_default_clock(self):
        before = datetime.now()
        entry = EventBuilder().build(LogLevel.INFO, "m")
        assert before <= entry.timestamp <= datetime.now()
