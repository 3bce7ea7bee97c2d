"""The dependency graph container."""

from __future__ import annotations

from graph.algos import build_adjacency, has_cycle
from graph.models import DependencyEdge, ModuleNode


class DependencyGraph:
    """Modules keyed by identifier plus the edges derived from their imports.

    Edges are appended as a side effect of :meth:`add_module`, in the order
    modules are added and then in the order of each module's imports. Edge
    targets are not required to be modules of the graph.

    Adding a module whose identifier is already present replaces the stored
    node but keeps the edges of the earlier insert, so repeated insertion
    accumulates duplicate edges.
    """

    def __init__(self) -> None:
        self._modules: dict[str, ModuleNode] = {}
        self._edges: list[DependencyEdge] = []

    def add_module(self, module: ModuleNode) -> None:
        """Add a module and derive one edge per import spec."""
        self._modules[module.class_name] = module
        self._build_edges(module)

    def _build_edges(self, module: ModuleNode) -> None:
        for spec in module.imports:
            self._edges.append(
                DependencyEdge(
                    from_module=module.class_name,
                    to_module=spec.module_name,
                    imported_services=spec.items_to_import,
                )
            )

    def get_modules(self) -> dict[str, ModuleNode]:
        return dict(self._modules)

    def get_edges(self) -> tuple[DependencyEdge, ...]:
        return tuple(self._edges)

    def get_module(self, class_name: str) -> ModuleNode | None:
        return self._modules.get(class_name)

    def has_module(self, class_name: str) -> bool:
        return class_name in self._modules

    def get_independent_modules(self) -> list[ModuleNode]:
        """Modules that import nothing."""
        return [module for module in self._modules.values() if not module.has_imports()]

    def get_unused_modules(self) -> list[ModuleNode]:
        """Modules that no edge points at, whether or not they import others."""
        referenced = {edge.to_module for edge in self._edges}
        return [
            module
            for name, module in self._modules.items()
            if name not in referenced
        ]

    def get_dangling_targets(self) -> list[str]:
        """Edge targets with no module in the graph, first-seen order."""
        seen: dict[str, None] = {}
        for edge in self._edges:
            if edge.to_module not in self._modules:
                seen.setdefault(edge.to_module, None)
        return list(seen)

    def get_outgoing_edges(self, class_name: str) -> list[DependencyEdge]:
        return [edge for edge in self._edges if edge.from_module == class_name]

    def get_incoming_edges(self, class_name: str) -> list[DependencyEdge]:
        return [edge for edge in self._edges if edge.to_module == class_name]

    def get_module_count(self) -> int:
        return len(self._modules)

    def get_edge_count(self) -> int:
        return len(self._edges)

    def adjacency(self) -> dict[str, list[str]]:
        """Adjacency map of tracked modules, in insertion order."""
        return build_adjacency(self._modules, self._edges)

    def has_cycles(self) -> bool:
        """Return True if the tracked modules form a circular dependency."""
        return has_cycle(self.adjacency())


__all__ = ["DependencyGraph"]
