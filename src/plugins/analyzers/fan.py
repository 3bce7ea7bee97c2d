"""Fan-in / fan-out statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph
    from graph.models import DependencyEdge


def compute_fan_stats(
    edges: tuple[DependencyEdge, ...] | list[DependencyEdge],
) -> tuple[dict[str, int], dict[str, int]]:
    """Compute fan-in and fan-out statistics from edges."""
    fan_in: dict[str, int] = {}
    fan_out: dict[str, int] = {}

    for edge in edges:
        fan_out[edge.from_module] = fan_out.get(edge.from_module, 0) + 1
        fan_in[edge.to_module] = fan_in.get(edge.to_module, 0) + 1

    return fan_in, fan_out


class FanAnalyzer:
    """Counts incoming and outgoing edges per module."""

    def __init__(self, top_n: int = 10) -> None:
        self.top_n = top_n

    @property
    def name(self) -> str:
        return "fan"

    def analyze(self, graph: DependencyGraph) -> dict[str, Any]:
        fan_in, fan_out = compute_fan_stats(graph.get_edges())
        top_modules = sorted(fan_in, key=lambda m: (-fan_in[m], m))[: self.top_n]
        return {
            "fan_in": dict(sorted(fan_in.items())),
            "fan_out": dict(sorted(fan_out.items())),
            "top_modules": top_modules,
        }


__all__ = ["FanAnalyzer", "compute_fan_stats"]
