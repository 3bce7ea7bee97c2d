"""Bootstrap hook that assembles the dependency graph."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from collect.factory import ModuleNodeFactory
from graph.dependency_graph import DependencyGraph

if TYPE_CHECKING:
    from collections.abc import Iterable

    from collect.descriptors import ModuleDescriptor

logger = logging.getLogger(__name__)


class SetupPhase(str, Enum):
    """Host bootstrap phases a setup hook is invoked for."""

    PRE = "pre"
    POST = "post"


class GraphCollector:
    """Collects every module registered during the host's bootstrap.

    Modules are recorded in the ``PRE`` phase, before imports are resolved;
    calls for any other phase are ignored.
    """

    def __init__(
        self,
        graph: DependencyGraph | None = None,
        factory: ModuleNodeFactory | None = None,
    ) -> None:
        self._graph = graph if graph is not None else DependencyGraph()
        self._factory = factory if factory is not None else ModuleNodeFactory()

    @property
    def graph(self) -> DependencyGraph:
        return self._graph

    def setup(self, phase: SetupPhase, module: ModuleDescriptor) -> None:
        if phase is not SetupPhase.PRE:
            return

        node = self._factory.from_descriptor(module)
        if self._graph.has_module(node.class_name):
            logger.debug("Module %s registered again; edges accumulate", node.class_name)
        self._graph.add_module(node)
        logger.debug(
            "Collected module %s (%d exports, %d imports)",
            node.class_name,
            node.get_export_count(),
            len(node.imports),
        )

    def collect(self, modules: Iterable[ModuleDescriptor]) -> DependencyGraph:
        """Run the ``PRE`` phase for each descriptor and return the graph."""
        for module in modules:
            self.setup(SetupPhase.PRE, module)
        return self._graph


__all__ = ["GraphCollector", "SetupPhase"]
