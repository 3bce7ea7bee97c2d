"""Structural overview of a dependency graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class SummaryAnalyzer:
    """Counts, leaf modules, unused modules and unresolved targets."""

    @property
    def name(self) -> str:
        return "summary"

    def analyze(self, graph: DependencyGraph) -> dict[str, Any]:
        return {
            "module_count": graph.get_module_count(),
            "edge_count": graph.get_edge_count(),
            "independent_modules": [
                module.class_name for module in graph.get_independent_modules()
            ],
            "unused_modules": [module.class_name for module in graph.get_unused_modules()],
            "dangling_targets": graph.get_dangling_targets(),
            "has_cycles": graph.has_cycles(),
        }


__all__ = ["SummaryAnalyzer"]
