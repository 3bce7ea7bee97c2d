"""Builds graph nodes from module descriptors."""

from __future__ import annotations

from collect.descriptors import ModuleDescriptor, describe_module
from graph.models import ModuleNode
from utils import DEFAULT_SEPARATOR, short_name


class ModuleNodeFactory:
    """Creates :class:`ModuleNode` values with a derived short name."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator

    def from_descriptor(self, descriptor: ModuleDescriptor) -> ModuleNode:
        return ModuleNode(
            class_name=descriptor.name,
            short_name=short_name(descriptor.name, self.separator),
            exports=descriptor.exports,
            imports=descriptor.imports,
        )

    def from_module_class(self, module_cls: type) -> ModuleNode:
        """Build a node from a host class exposing optional capabilities."""
        return self.from_descriptor(describe_module(module_cls))


__all__ = ["ModuleNodeFactory"]
