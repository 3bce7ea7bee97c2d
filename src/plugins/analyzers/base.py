"""Analyzer contract and registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graph.dependency_graph import DependencyGraph


@runtime_checkable
class Analyzer(Protocol):
    """Computes a named bag of results from a finished graph."""

    @property
    def name(self) -> str: ...

    def analyze(self, graph: DependencyGraph) -> dict[str, Any]: ...


class AnalyzerRegistry(PluginRegistry[Analyzer]):
    kind = "analyzer"


def run_analyzers(
    graph: DependencyGraph,
    registry: AnalyzerRegistry,
    names: Iterable[str] | None = None,
) -> dict[str, dict[str, Any]]:
    """Run the selected analyzers (all when ``names`` is None).

    Raises:
        PluginNotFoundError: If a requested analyzer is not registered.
    """
    selected = registry.names() if names is None else list(names)
    results: dict[str, dict[str, Any]] = {}
    for name in selected:
        results[name] = registry.get(name).analyze(graph)
    return results


__all__ = ["Analyzer", "AnalyzerRegistry", "run_analyzers"]
