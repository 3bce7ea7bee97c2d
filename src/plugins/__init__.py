"""Pluggable analyzers and renderers over a finished dependency graph."""

from plugins.registry import PluginNotFoundError, PluginRegistry

__all__ = ["PluginNotFoundError", "PluginRegistry"]
