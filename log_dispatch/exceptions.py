"""
Exception hierarchy for the logging core

Every error raised by the package derives from LoggerError. Errors coming
from writers themselves (I/O failures and the like) are not wrapped.
"""


class LoggerError(Exception):
    """Base class for all logging core errors."""

    pass


class InvalidArgumentError(LoggerError, ValueError):
    """
    Malformed caller input.

    Raised for unsupported levels, messages or extra attributes, for
    values that are neither a plugin name nor a plugin instance, and for
    malformed writer/filter options.
    """

    pass


class UnknownPluginError(InvalidArgumentError, LookupError):
    """A writer or filter name has no matching registry entry."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"Unable to resolve {kind} plugin '{name}'")
        self.kind = kind
        self.name = name


class LoggerRuntimeError(LoggerError, RuntimeError):
    """An operational precondition failed (e.g. no writer to log to)."""

    pass
