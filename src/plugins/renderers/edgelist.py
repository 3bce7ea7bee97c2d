"""Plain edge list renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class EdgeListRenderer:
    """One ``source -> target`` line per edge, in edge order."""

    @property
    def name(self) -> str:
        return "edgelist"

    @property
    def file_extension(self) -> str:
        return "edgelist"

    @property
    def mime_type(self) -> str:
        return "text/plain"

    @property
    def description(self) -> str:
        return "Plain text edge list"

    def render(self, graph: DependencyGraph) -> str:
        return "".join(
            f"{edge.from_module} -> {edge.to_module}\n" for edge in graph.get_edges()
        )


__all__ = ["EdgeListRenderer"]
