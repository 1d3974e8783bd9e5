"""
Plugin registry base

Maps short, case-insensitive names to factories producing objects that
implement one fixed capability (Writer or Filter).
"""

import inspect
from typing import Any, Callable, Dict, Mapping, Optional

from log_dispatch.exceptions import InvalidArgumentError, UnknownPluginError

Factory = Callable[[Dict[str, Any]], Any]


def canonical_name(name: str) -> str:
    """Lower-case a plugin name and drop separators."""
    return "".join(ch for ch in name.lower() if ch not in "-_. \\/")


def build_from_options(cls: type, options: Mapping[str, Any]) -> Any:
    """
    Instantiate cls with options as keyword arguments.

    Raises:
        InvalidArgumentError: If options do not fit the constructor signature
    """
    try:
        inspect.signature(cls).bind(**options)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"Invalid options for {cls.__name__}: {exc}"
        ) from exc
    return cls(**options)


class PluginManager:
    """
    Registry of named plugin factories for a single capability.

    Subclasses set ``capability`` (the base class every plugin must
    extend), ``kind`` (used in error messages) and fill the registry in
    ``_register_defaults``.

    Example:
        plugins = WriterPluginManager()
        plugins.register_class("console", StreamWriter)
        writer = plugins.get("Console", {"colored": False})
    """

    capability: type = object
    kind: str = "plugin"

    def __init__(self):
        self._factories: Dict[str, Factory] = {}
        self._instances: Dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the built-in plugins."""
        pass

    def register(self, name: str, factory: Factory) -> None:
        """
        Register a factory under name.

        Args:
            name: Short plugin name (case-insensitive)
            factory: Callable taking an options dict, returning a plugin
        """
        if not callable(factory):
            raise InvalidArgumentError(
                f"Factory for {self.kind} '{name}' must be callable"
            )
        key = canonical_name(name)
        self._instances.pop(key, None)
        self._factories[key] = factory

    def register_class(self, name: str, cls: type) -> None:
        """Register a plugin class whose constructor takes the options."""
        if not (isinstance(cls, type) and issubclass(cls, self.capability)):
            raise InvalidArgumentError(
                f"{cls!r} must implement {self.kind}"
            )
        self.register(name, lambda options: build_from_options(cls, options))

    def register_instance(self, name: str, instance: Any) -> None:
        """Register a shared instance returned on every lookup of name."""
        self._validate(instance)
        key = canonical_name(name)
        self._factories.pop(key, None)
        self._instances[key] = instance

    def unregister(self, name: str) -> None:
        """Remove a plugin. Does nothing if name is not registered."""
        key = canonical_name(name)
        self._factories.pop(key, None)
        self._instances.pop(key, None)

    def has(self, name: str) -> bool:
        """Check whether name is registered."""
        key = canonical_name(name)
        return key in self._factories or key in self._instances

    def get_names(self):
        """Get all registered (canonical) plugin names."""
        return sorted(set(self._factories) | set(self._instances))

    def get(self, name: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Build (or fetch) the plugin registered under name.

        Args:
            name: Plugin name (case-insensitive)
            options: Options passed verbatim to the factory

        Returns:
            Plugin instance

        Raises:
            UnknownPluginError: If name is not registered
            InvalidArgumentError: If options are malformed or the factory
                returns something that is not a plugin
        """
        key = canonical_name(name)
        if key in self._instances:
            return self._instances[key]
        if key not in self._factories:
            raise UnknownPluginError(self.kind, name)

        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"Options for {self.kind} '{name}' must be a mapping; "
                f"received {type(options).__name__}"
            )

        plugin = self._factories[key](dict(options))
        self._validate(plugin)
        return plugin

    def resolve(
        self,
        plugin: Any,
        options: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Turn a plugin name or instance into an instance.

        Instances of the capability are returned unchanged; strings are
        looked up with get().

        Raises:
            UnknownPluginError: If a name is not registered
            InvalidArgumentError: If plugin is neither a name nor an instance
        """
        if isinstance(plugin, self.capability):
            return plugin
        if isinstance(plugin, str):
            return self.get(plugin, options)
        raise InvalidArgumentError(
            f"Invalid {self.kind.lower()}: must implement {self.kind} "
            f"({self.capability.__module__}.{self.capability.__name__}) "
            f"or be a registered plugin name; received {type(plugin).__name__}"
        )

    def _validate(self, plugin: Any) -> None:
        if not isinstance(plugin, self.capability):
            raise InvalidArgumentError(
                f"Plugin of type {type(plugin).__name__} is invalid; "
                f"must implement {self.kind}"
            )

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(plugins={self.get_names()})"
