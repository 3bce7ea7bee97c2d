"""Strong coupling report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graph.models import DEFAULT_COUPLING_THRESHOLD, DEFAULT_MAX_SERVICES_LENGTH

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class CouplingAnalyzer:
    """Lists edges that import more services than the threshold allows."""

    def __init__(
        self,
        threshold: int = DEFAULT_COUPLING_THRESHOLD,
        max_services_length: int = DEFAULT_MAX_SERVICES_LENGTH,
    ) -> None:
        self.threshold = threshold
        self.max_services_length = max_services_length

    @property
    def name(self) -> str:
        return "coupling"

    def analyze(self, graph: DependencyGraph) -> dict[str, Any]:
        strong = [
            {
                "from": edge.from_module,
                "to": edge.to_module,
                "count": edge.get_imported_service_count(),
                "services": edge.get_formatted_services(self.max_services_length),
            }
            for edge in graph.get_edges()
            if edge.is_strong_coupling(self.threshold)
        ]
        return {
            "threshold": self.threshold,
            "strong_count": len(strong),
            "strong_couplings": strong,
        }


__all__ = ["CouplingAnalyzer"]
