"""Renderer plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plugins.renderers.base import Renderer, RendererRegistry
from plugins.renderers.dot import DotRenderer
from plugins.renderers.edgelist import EdgeListRenderer
from plugins.renderers.json_graph import JsonRenderer
from plugins.renderers.mermaid import MermaidRenderer

if TYPE_CHECKING:
    from settings.config import ModGraphConfig


def default_renderers(config: ModGraphConfig | None = None) -> RendererRegistry:
    """Build a registry holding the built-in renderers."""
    registry = RendererRegistry()
    if config is None:
        renderers: list[Renderer] = [
            MermaidRenderer(),
            DotRenderer(),
            JsonRenderer(),
            EdgeListRenderer(),
        ]
    else:
        options = {
            "separator": config.namespace_separator,
            "threshold": config.coupling.threshold,
            "max_services_length": config.coupling.max_services_length,
        }
        renderers = [
            MermaidRenderer(**options),
            DotRenderer(**options),
            JsonRenderer(threshold=config.coupling.threshold),
            EdgeListRenderer(),
        ]
    for renderer in renderers:
        registry.register(renderer.name, renderer)
    return registry


__all__ = [
    "DotRenderer",
    "EdgeListRenderer",
    "JsonRenderer",
    "MermaidRenderer",
    "Renderer",
    "RendererRegistry",
    "default_renderers",
]
