"""Tests for the warning and exception bridges"""

import sys
import warnings

import pytest

from log_dispatch import (
    ErrorHandler,
    ExceptionHandler,
    InvalidArgumentError,
    LogLevel,
    Logger,
    LoggerRuntimeError,
)
from log_dispatch.writers import MockWriter


class WarningWriter(MockWriter):
    """Writer that raises a warning of its own while writing."""

    def write(self, entry):
        super().write(entry)
        warnings.warn("deprecated sink API", DeprecationWarning)


class HookWriter(MockWriter):
    """Writer that reports an error through sys.excepthook while writing."""

    def __init__(self):
        super().__init__()
        self.error = OSError("sink offline")

    def write(self, entry):
        super().write(entry)
        sys.excepthook(OSError, self.error, None)


class TestErrorHandler:
    """Test the warnings bridge."""

    def setup_method(self):
        ErrorHandler.unregister()
        self.writer = MockWriter()
        self.logger = Logger()
        self.logger.add_writer(self.writer)

    def teardown_method(self):
        ErrorHandler.unregister()

    def test_register_once(self):
        assert ErrorHandler.register(self.logger) is True
        assert ErrorHandler.is_registered()
        assert ErrorHandler.register(Logger()) is False

    def test_register_requires_logger(self):
        with pytest.raises(InvalidArgumentError):
            ErrorHandler.register(None)
        assert not ErrorHandler.is_registered()

    def test_logged_only_while_registered(self):
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            original = warnings.showwarning

            warnings.warn("before", RuntimeWarning)
            ErrorHandler.register(self.logger)
            warnings.warn("during", RuntimeWarning)
            ErrorHandler.unregister()
            warnings.warn("after", RuntimeWarning)

            assert warnings.showwarning is original

        assert [e.message for e in self.writer.events] == ["during"]

    def test_entry_details(self):
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            ErrorHandler.register(self.logger)
            warnings.warn("careful", UserWarning)
            ErrorHandler.unregister()

        entry = self.writer.events[0]
        assert entry.level is LogLevel.NOTICE
        assert entry.extra["category"] == "UserWarning"
        assert entry.extra["file"].endswith("test_error_handler.py")
        assert isinstance(entry.extra["line"], int)

    def test_previous_handler_still_called(self):
        seen = []

        def previous(message, category, filename, lineno, file=None, line=None):
            seen.append(str(message))

        with warnings.catch_warnings():
            warnings.simplefilter("always")
            warnings.showwarning = previous
            ErrorHandler.register(self.logger)
            warnings.warn("shown", RuntimeWarning)
            ErrorHandler.unregister()
            assert warnings.showwarning is previous

        assert seen == ["shown"]
        assert len(self.writer.events) == 1

    def test_warning_raised_by_writer_is_not_logged_again(self):
        seen = []

        def previous(message, category, filename, lineno, file=None, line=None):
            seen.append(str(message))

        writer = WarningWriter()
        logger = Logger()
        logger.add_writer(writer)

        with warnings.catch_warnings():
            warnings.simplefilter("always")
            warnings.showwarning = previous
            ErrorHandler.register(logger)
            warnings.warn("app warning", UserWarning)
            warnings.warn("second", UserWarning)
            ErrorHandler.unregister()

        assert [e.message for e in writer.events] == ["app warning", "second"]
        assert seen == ["deprecated sink API", "app warning", "deprecated sink API", "second"]

    def test_unregister_when_not_registered(self):
        original = warnings.showwarning
        ErrorHandler.unregister()
        assert warnings.showwarning is original

    def test_context_manager(self):
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            with ErrorHandler.registered(self.logger) as installed:
                assert installed is True
                warnings.warn("scoped", DeprecationWarning)
            assert not ErrorHandler.is_registered()

        assert self.writer.events[0].level is LogLevel.DEBUG

    def test_context_manager_keeps_existing_registration(self):
        ErrorHandler.register(self.logger)
        with ErrorHandler.registered(Logger()) as installed:
            assert installed is False
        assert ErrorHandler.is_registered()

    @pytest.mark.parametrize("category,level", [
        (DeprecationWarning, LogLevel.DEBUG),
        (PendingDeprecationWarning, LogLevel.DEBUG),
        (FutureWarning, LogLevel.DEBUG),
        (UserWarning, LogLevel.NOTICE),
        (ResourceWarning, LogLevel.NOTICE),
        (RuntimeWarning, LogLevel.WARN),
        (SyntaxWarning, LogLevel.WARN),
        (Warning, LogLevel.WARN),
    ])
    def test_level_for(self, category, level):
        assert ErrorHandler.level_for(category) is level

    def test_logger_errors_not_caught(self):
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            ErrorHandler.register(Logger())
            with pytest.raises(LoggerRuntimeError):
                warnings.warn("nowhere to go", RuntimeWarning)
            ErrorHandler.unregister()


class TestExceptionHandler:
    """Test the sys.excepthook bridge."""

    def setup_method(self):
        ExceptionHandler.unregister()
        self.writer = MockWriter()
        self.logger = Logger()
        self.logger.add_writer(self.writer)
        self.hook_calls = []

    def teardown_method(self):
        ExceptionHandler.unregister()

    def _previous_hook(self, exc_type, exc_value, exc_tb):
        self.hook_calls.append(exc_value)

    def test_logs_chain_and_calls_previous(self, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", self._previous_hook)
        try:
            try:
                raise OSError("disk gone")
            except OSError as exc:
                raise ValueError("save failed") from exc
        except ValueError as exc:
            error = exc

        assert Logger.register_exception_handler(self.logger) is True
        assert Logger.register_exception_handler(self.logger) is False
        sys.excepthook(type(error), error, error.__traceback__)
        Logger.unregister_exception_handler()

        assert [e.message for e in self.writer.events] == ["save failed", "disk gone"]
        assert all(e.level is LogLevel.ERR for e in self.writer.events)
        assert self.writer.events[0].extra["exception"] == "ValueError"
        assert self.writer.events[0].extra["file"].endswith("test_error_handler.py")
        assert self.hook_calls == [error]
        assert sys.excepthook == self._previous_hook

    def test_keyboard_interrupt_not_logged(self, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", self._previous_hook)
        ExceptionHandler.register(self.logger)
        error = KeyboardInterrupt()
        sys.excepthook(KeyboardInterrupt, error, None)
        ExceptionHandler.unregister()

        assert self.writer.events == []
        assert self.hook_calls == [error]

    def test_error_reported_by_writer_is_not_logged_again(self, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", self._previous_hook)
        writer = HookWriter()
        logger = Logger()
        logger.add_writer(writer)
        ExceptionHandler.register(logger)
        error = ValueError("crash")
        sys.excepthook(ValueError, error, None)
        ExceptionHandler.unregister()

        assert [e.message for e in writer.events] == ["crash"]
        assert self.hook_calls == [writer.error, error]

    def test_empty_message_uses_type_name(self, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", self._previous_hook)
        ExceptionHandler.register(self.logger)
        error = RuntimeError()
        sys.excepthook(RuntimeError, error, None)
        ExceptionHandler.unregister()

        assert self.writer.events[0].message == "RuntimeError"
