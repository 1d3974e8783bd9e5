"""
Logger configuration management
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from log_dispatch.core.writer_queue import DEFAULT_PRIORITY
from log_dispatch.exceptions import InvalidArgumentError


@dataclass
class FilterSpec:
    """A filter referenced by name, with its options."""

    name: str
    options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate filter spec."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError("filter name must be a non-empty string")
        if not isinstance(self.options, Mapping):
            raise InvalidArgumentError(f"options for filter '{self.name}' must be a mapping")
        self.options = dict(self.options)


@dataclass
class WriterSpec:
    """A writer referenced by name, with its priority, options and filters."""

    name: str
    priority: Optional[int] = None
    options: Dict[str, Any] = field(default_factory=dict)
    filters: List[FilterSpec] = field(default_factory=list)

    def __post_init__(self):
        """Validate writer spec."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError("writer name must be a non-empty string")
        if self.priority is not None and (
            not isinstance(self.priority, int) or isinstance(self.priority, bool)
        ):
            raise InvalidArgumentError(f"priority of writer '{self.name}' must be int")
        if not isinstance(self.options, Mapping):
            raise InvalidArgumentError(f"options for writer '{self.name}' must be a mapping")
        self.options = dict(self.options)
        self.filters = [
            f if isinstance(f, FilterSpec) else FilterSpec(**f)
            for f in self.filters
        ]


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Writers listed here are resolved through the logger's writer plugin
    manager when the logger is created.
    """

    # Basic settings
    name: str = "logger"
    default_priority: int = DEFAULT_PRIORITY

    # Writers added at construction
    writers: List[WriterSpec] = field(default_factory=list)

    # Process-wide bridges
    register_error_handler: bool = False
    register_exception_handler: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.default_priority, int) or isinstance(self.default_priority, bool):
            raise InvalidArgumentError("default_priority must be int")
        self.writers = [
            w if isinstance(w, WriterSpec) else WriterSpec(**w)
            for w in self.writers
        ]

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a mapping.

        Args:
            data: Mapping such as
                {"name": "app",
                 "writers": [{"name": "stream", "priority": 2,
                              "options": {"stream": "stdout"},
                              "filters": [{"name": "priority",
                                           "options": {"priority": "warn"}}]}],
                 "register_error_handler": True}

        Returns:
            New LoggerConfig instance

        Raises:
            InvalidArgumentError: If data contains unknown keys or bad values
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError("configuration must be a mapping")
        known = {"name", "default_priority", "writers",
                 "register_error_handler", "register_exception_handler"}
        unknown = set(data) - known
        if unknown:
            raise InvalidArgumentError(
                f"Unknown configuration keys: {sorted(unknown)}"
            )
        try:
            return cls(**data)
        except TypeError as exc:
            raise InvalidArgumentError(f"Invalid configuration: {exc}") from exc
