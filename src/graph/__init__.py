"""Module dependency graph: data model and structural queries."""

from graph.dependency_graph import DependencyGraph
from graph.models import DependencyEdge, ImportSpec, ModuleNode

__all__ = [
    "DependencyEdge",
    "DependencyGraph",
    "ImportSpec",
    "ModuleNode",
]
