"""Generic name-keyed registry shared by analyzers and renderers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginNotFoundError(LookupError):
    """Raised when a registry has no plugin under the requested name."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"No {kind} registered under {name!r}")


class PluginRegistry(Generic[T]):
    """Plugins of one kind, keyed by name in registration order.

    Registering a name twice replaces the earlier plugin.
    """

    kind = "plugin"

    def __init__(self) -> None:
        self._plugins: dict[str, T] = {}

    def register(self, name: str, plugin: T) -> None:
        if name in self._plugins:
            logger.debug("Replacing %s %r", self.kind, name)
        else:
            logger.debug("Registering %s %r", self.kind, name)
        self._plugins[name] = plugin

    def unregister(self, name: str) -> None:
        if name not in self._plugins:
            raise PluginNotFoundError(self.kind, name)
        del self._plugins[name]

    def get(self, name: str) -> T:
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(self.kind, name) from None

    def find(self, name: str) -> T | None:
        return self._plugins.get(name)

    def has(self, name: str) -> bool:
        return name in self._plugins

    def names(self) -> list[str]:
        return list(self._plugins)

    def items(self) -> list[tuple[str, T]]:
        return list(self._plugins.items())

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)


__all__ = ["PluginNotFoundError", "PluginRegistry"]
