"""
Bridges from Python's warning and exception hooks to a Logger

Both bridges hold process-wide state: at most one logger is attached to
``warnings.showwarning`` and at most one to ``sys.excepthook``. The
previous hook is always restored on unregister.
"""

from __future__ import annotations

import sys
import warnings
from contextlib import contextmanager
from types import TracebackType
from typing import Any, Callable, Iterator, List, Optional, Tuple, Type

from log_dispatch.core.log_level import LogLevel
from log_dispatch.exceptions import InvalidArgumentError


def _check_logger(logger: Any) -> None:
    if not callable(getattr(logger, "log", None)):
        raise InvalidArgumentError("Invalid Logger specified")


class ErrorHandler:
    """
    Turns warnings into log entries.

    While registered, every warning that the warnings filters let through
    is logged on the attached logger and then passed to the previously
    installed ``showwarning``, so it is still displayed as usual.

    Example:
        ErrorHandler.register(logger)
        warnings.warn("disk almost full", RuntimeWarning)  # logged as WARN
        ErrorHandler.unregister()
    """

    # First matching category wins
    CATEGORY_LEVELS: List[Tuple[Type[Warning], LogLevel]] = [
        (DeprecationWarning, LogLevel.DEBUG),
        (PendingDeprecationWarning, LogLevel.DEBUG),
        (FutureWarning, LogLevel.DEBUG),
        (UserWarning, LogLevel.NOTICE),
        (ImportWarning, LogLevel.NOTICE),
        (ResourceWarning, LogLevel.NOTICE),
        (RuntimeWarning, LogLevel.WARN),
        (SyntaxWarning, LogLevel.WARN),
        (BytesWarning, LogLevel.WARN),
        (UnicodeWarning, LogLevel.WARN),
    ]
    DEFAULT_LEVEL = LogLevel.WARN

    _logger: Any = None
    _previous_handler: Optional[Callable[..., Any]] = None
    _registered: bool = False
    _handling: bool = False

    @classmethod
    def register(cls, logger: Any) -> bool:
        """
        Attach logger to the warnings machinery.

        Args:
            logger: Logger receiving the warnings

        Returns:
            True if installed, False if a logger is already registered

        Raises:
            InvalidArgumentError: If logger has no log() method
        """
        _check_logger(logger)
        if cls._registered:
            return False

        cls._previous_handler = warnings.showwarning
        cls._logger = logger
        warnings.showwarning = cls._handle_warning
        cls._registered = True
        return True

    @classmethod
    def unregister(cls) -> None:
        """Restore the handler that was active before register()."""
        if not cls._registered:
            return

        warnings.showwarning = cls._previous_handler
        cls._previous_handler = None
        cls._logger = None
        cls._registered = False

    @classmethod
    def is_registered(cls) -> bool:
        """
        Check if a logger is registered.

        Returns:
            True if the bridge is installed
        """
        return cls._registered

    @classmethod
    @contextmanager
    def registered(cls, logger: Any) -> Iterator[bool]:
        """
        Keep logger registered for the duration of a with block.

        Yields the result of register(); only a registration made here is
        undone on exit.
        """
        installed = cls.register(logger)
        try:
            yield installed
        finally:
            if installed:
                cls.unregister()

    @classmethod
    def level_for(cls, category: Type[Warning]) -> LogLevel:
        """Map a warning category to a log level."""
        for base, level in cls.CATEGORY_LEVELS:
            if issubclass(category, base):
                return level
        return cls.DEFAULT_LEVEL

    @classmethod
    def _handle_warning(
        cls,
        message: Any,
        category: Type[Warning],
        filename: str,
        lineno: int,
        file: Any = None,
        line: Optional[str] = None
    ) -> None:
        logger = cls._logger
        previous = cls._previous_handler

        # Warnings raised while a warning is being logged are only displayed
        if logger is not None and not cls._handling:
            cls._handling = True
            try:
                logger.log(
                    cls.level_for(category),
                    str(message),
                    {
                        "category": category.__name__,
                        "file": filename,
                        "line": lineno,
                    },
                )
            finally:
                cls._handling = False

        if previous is not None:
            previous(message, category, filename, lineno, file, line)


class ExceptionHandler:
    """
    Logs uncaught exceptions through ``sys.excepthook``.

    The exception and every exception it was raised from (``__cause__``
    or ``__context__``) are logged at ERR, outermost first. The previous
    hook then runs, so the traceback is still printed.
    KeyboardInterrupt is passed straight through.
    """

    LEVEL = LogLevel.ERR

    _logger: Any = None
    _previous_hook: Optional[Callable[..., Any]] = None
    _registered: bool = False
    _handling: bool = False

    @classmethod
    def register(cls, logger: Any) -> bool:
        """
        Attach logger to sys.excepthook.

        Returns:
            True if installed, False if a logger is already registered
        """
        _check_logger(logger)
        if cls._registered:
            return False

        cls._previous_hook = sys.excepthook
        cls._logger = logger
        sys.excepthook = cls._handle_exception
        cls._registered = True
        return True

    @classmethod
    def unregister(cls) -> None:
        """Restore the hook that was active before register()."""
        if not cls._registered:
            return

        sys.excepthook = cls._previous_hook
        cls._previous_hook = None
        cls._logger = None
        cls._registered = False

    @classmethod
    def is_registered(cls) -> bool:
        """Check if a logger is registered."""
        return cls._registered

    @staticmethod
    def exception_chain(exc: BaseException) -> List[BaseException]:
        """Return exc followed by the exceptions it was raised from."""
        chain: List[BaseException] = []
        current: Optional[BaseException] = exc
        while current is not None and current not in chain:
            chain.append(current)
            current = current.__cause__ or current.__context__
        return chain

    @classmethod
    def _log_chain(cls, logger: Any, exc_value: BaseException) -> None:
        for exc in cls.exception_chain(exc_value):
            tb = exc.__traceback__
            while tb is not None and tb.tb_next is not None:
                tb = tb.tb_next
            extra = {"exception": type(exc).__name__}
            if tb is not None:
                extra["file"] = tb.tb_frame.f_code.co_filename
                extra["line"] = tb.tb_lineno
            logger.log(cls.LEVEL, str(exc) or type(exc).__name__, extra)

    @classmethod
    def _handle_exception(
        cls,
        exc_type: Type[BaseException],
        exc_value: BaseException,
        exc_tb: Optional[TracebackType]
    ) -> None:
        logger = cls._logger
        previous = cls._previous_hook or sys.__excepthook__

        if (
            logger is not None
            and not cls._handling
            and not issubclass(exc_type, KeyboardInterrupt)
        ):
            cls._handling = True
            try:
                cls._log_chain(logger, exc_value)
            finally:
                cls._handling = False

        previous(exc_type, exc_value, exc_tb)
