"""Circular dependency report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graph.algos import find_cycles

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class CycleAnalyzer:
    """Reports the strongly connected components that form cycles."""

    @property
    def name(self) -> str:
        return "cycles"

    def analyze(self, graph: DependencyGraph) -> dict[str, Any]:
        cycles = find_cycles(graph.adjacency())
        return {
            "has_cycles": graph.has_cycles(),
            "cycle_count": len(cycles),
            "cycles": cycles,
        }


__all__ = ["CycleAnalyzer"]
