"""JSON renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson

from graph.models import DEFAULT_COUPLING_THRESHOLD

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class JsonRenderer:
    """Serializes modules, edges and counts as sorted, indented JSON."""

    def __init__(self, threshold: int = DEFAULT_COUPLING_THRESHOLD) -> None:
        self.threshold = threshold

    @property
    def name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return "json"

    @property
    def mime_type(self) -> str:
        return "application/json"

    @property
    def description(self) -> str:
        return "JSON document with modules and edges"

    def render(self, graph: DependencyGraph) -> str:
        payload: dict[str, Any] = {
            "module_count": graph.get_module_count(),
            "edge_count": graph.get_edge_count(),
            "modules": [
                module.model_dump(mode="json")
                for module in graph.get_modules().values()
            ],
            "edges": [
                {
                    **edge.model_dump(mode="json"),
                    "strong_coupling": edge.is_strong_coupling(self.threshold),
                }
                for edge in graph.get_edges()
            ],
        }
        opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE
        return orjson.dumps(payload, option=opts).decode("utf-8")


__all__ = ["JsonRenderer"]
