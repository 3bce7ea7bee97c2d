"""Graphviz DOT renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graph.models import DEFAULT_COUPLING_THRESHOLD, DEFAULT_MAX_SERVICES_LENGTH
from utils import DEFAULT_SEPARATOR, short_name

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class DotRenderer:
    """Renders the graph as a Graphviz ``digraph``."""

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        threshold: int = DEFAULT_COUPLING_THRESHOLD,
        max_services_length: int = DEFAULT_MAX_SERVICES_LENGTH,
    ) -> None:
        self.separator = separator
        self.threshold = threshold
        self.max_services_length = max_services_length

    @property
    def name(self) -> str:
        return "dot"

    @property
    def file_extension(self) -> str:
        return "dot"

    @property
    def mime_type(self) -> str:
        return "text/vnd.graphviz"

    @property
    def description(self) -> str:
        return "Graphviz DOT digraph"

    def render(self, graph: DependencyGraph) -> str:
        lines = [
            "digraph dependencies {",
            "    rankdir=LR;",
            "    node [shape=box];",
        ]

        for module in graph.get_modules().values():
            lines.append(
                f"    {_quote(module.class_name)} [label={_quote(module.short_name)}];"
            )

        for target in graph.get_dangling_targets():
            label = short_name(target, self.separator)
            lines.append(f"    {_quote(target)} [label={_quote(label)}, style=dashed];")

        for edge in graph.get_edges():
            attrs: list[str] = []
            services = edge.get_formatted_services(self.max_services_length)
            if services:
                attrs.append(f"label={_quote(services)}")
            if edge.is_strong_coupling(self.threshold):
                attrs.append("penwidth=2")
            suffix = f" [{', '.join(attrs)}]" if attrs else ""
            lines.append(
                f"    {_quote(edge.from_module)} -> {_quote(edge.to_module)}{suffix};"
            )

        lines.append("}")
        return "\n".join(lines) + "\n"


__all__ = ["DotRenderer"]
