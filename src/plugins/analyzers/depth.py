"""Dependency depth per module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graph.algos import compute_depths

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class DepthAnalyzer:
    """Longest chain of tracked dependencies below each module.

    Unresolved targets do not add depth. Modules caught in or above a cycle
    are listed under ``unresolved`` instead of getting a depth.
    """

    @property
    def name(self) -> str:
        return "depth"

    def analyze(self, graph: DependencyGraph) -> dict[str, Any]:
        depths, unresolved = compute_depths(graph.adjacency())
        return {
            "depths": depths,
            "max_depth": max(depths.values(), default=0),
            "unresolved": unresolved,
        }


__all__ = ["DepthAnalyzer"]
