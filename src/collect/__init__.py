"""Graph construction from host module descriptors."""

from collect.collector import GraphCollector, SetupPhase
from collect.descriptors import (
    DescriptorError,
    ExportsServices,
    ImportsServices,
    ModuleDescriptor,
    describe_module,
    load_descriptors,
)
from collect.factory import ModuleNodeFactory

__all__ = [
    "DescriptorError",
    "ExportsServices",
    "GraphCollector",
    "ImportsServices",
    "ModuleDescriptor",
    "ModuleNodeFactory",
    "SetupPhase",
    "describe_module",
    "load_descriptors",
]
