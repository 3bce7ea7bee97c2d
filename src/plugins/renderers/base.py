"""Renderer contract and registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


@runtime_checkable
class Renderer(Protocol):
    """Turns a finished graph into text in one output format.

    ``file_extension`` carries no leading dot (e.g. ``"mmd"``, ``"dot"``).
    """

    @property
    def name(self) -> str: ...

    @property
    def file_extension(self) -> str: ...

    @property
    def mime_type(self) -> str: ...

    @property
    def description(self) -> str: ...

    def render(self, graph: DependencyGraph) -> str: ...


class RendererRegistry(PluginRegistry[Renderer]):
    kind = "renderer"


__all__ = ["Renderer", "RendererRegistry"]
