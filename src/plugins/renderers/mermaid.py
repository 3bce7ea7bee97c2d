"""Mermaid flowchart renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graph.models import DEFAULT_COUPLING_THRESHOLD, DEFAULT_MAX_SERVICES_LENGTH
from utils import DEFAULT_SEPARATOR, short_name

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


def _escape(text: str) -> str:
    return text.replace('"', "#quot;")


class MermaidRenderer:
    """Renders the graph as a left-to-right Mermaid flowchart.

    Unresolved targets are drawn as dashed nodes and strong couplings as
    thick arrows.
    """

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
        return "mermaid"

    @property
    def file_extension(self) -> str:
        return "mmd"

    @property
    def mime_type(self) -> str:
        return "text/vnd.mermaid"

    @property
    def description(self) -> str:
        return "Mermaid flowchart"

    def render(self, graph: DependencyGraph) -> str:
        lines = ["graph LR"]

        ids: dict[str, str] = {}
        for module in graph.get_modules().values():
            node_id = f"m{len(ids)}"
            ids[module.class_name] = node_id
            lines.append(f'    {node_id}["{_escape(module.short_name)}"]')

        dangling: list[str] = []
        for target in graph.get_dangling_targets():
            node_id = f"m{len(ids)}"
            ids[target] = node_id
            dangling.append(node_id)
            label = short_name(target, self.separator)
            lines.append(f'    {node_id}["{_escape(label)}"]')

        for edge in graph.get_edges():
            arrow = "==>" if edge.is_strong_coupling(self.threshold) else "-->"
            services = edge.get_formatted_services(self.max_services_length)
            label = f'|"{_escape(services)}"|' if services else ""
            source = ids[edge.from_module]
            target = ids[edge.to_module]
            lines.append(f"    {source} {arrow}{label} {target}")

        if dangling:
            lines.append("    classDef dangling stroke-dasharray: 5 5")
            lines.append(f"    class {','.join(dangling)} dangling")

        return "\n".join(lines) + "\n"


__all__ = ["MermaidRenderer"]
