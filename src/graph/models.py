"""Node and edge models for the module dependency graph.

All models are immutable once constructed; sequences are held as tuples so
that the declared order of exports and imports survives intact.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COUPLING_THRESHOLD = 3
DEFAULT_MAX_SERVICES_LENGTH = 50

_ELLIPSIS = "..."


class ImportSpec(BaseModel):
    """Services one module requests from another module."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    module_name: str
    items_to_import: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def create(cls, module_name: str, *items: str) -> ImportSpec:
        return cls(module_name=module_name, items_to_import=items)


class ModuleNode(BaseModel):
    """A single module with the services it exports and imports."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    class_name: str
    short_name: str
    exports: tuple[str, ...] = Field(default_factory=tuple)
    imports: tuple[ImportSpec, ...] = Field(default_factory=tuple)

    def get_imported_modules(self) -> list[str]:
        """Identifiers of every module this one imports from, in order."""
        return [spec.module_name for spec in self.imports]

    def get_imported_services(self) -> list[str]:
        """All imported service identifiers across every import spec."""
        services: list[str] = []
        for spec in self.imports:
            services.extend(spec.items_to_import)
        return services

    def has_exports(self) -> bool:
        return bool(self.exports)

    def has_imports(self) -> bool:
        return bool(self.imports)

    def get_export_count(self) -> int:
        return len(self.exports)

    def get_import_count(self) -> int:
        return len(self.get_imported_services())


class DependencyEdge(BaseModel):
    """A directed "imports from" relation between two modules.

    ``to_module`` may name a module that is not part of the graph; such an
    edge represents an unresolved dependency.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    from_module: str
    to_module: str
    imported_services: tuple[str, ...] = Field(default_factory=tuple)

    def get_imported_service_count(self) -> int:
        return len(self.imported_services)

    def is_strong_coupling(self, threshold: int = DEFAULT_COUPLING_THRESHOLD) -> bool:
        """Return True when more than ``threshold`` services cross this edge."""
        return self.get_imported_service_count() > threshold

    def get_formatted_services(
        self, max_length: int = DEFAULT_MAX_SERVICES_LENGTH
    ) -> str:
        """Join the imported services, truncating to ``max_length`` characters.

        A truncated result is exactly ``max_length`` characters long and ends
        in ``...``, or is a prefix of ``...`` when ``max_length`` is below 3.
        """
        services = ", ".join(self.imported_services)
        if len(services) <= max_length:
            return services
        if max_length <= len(_ELLIPSIS):
            return _ELLIPSIS[: max(max_length, 0)]
        return services[: max_length - len(_ELLIPSIS)] + _ELLIPSIS


__all__ = [
    "DEFAULT_COUPLING_THRESHOLD",
    "DEFAULT_MAX_SERVICES_LENGTH",
    "DependencyEdge",
    "ImportSpec",
    "ModuleNode",
]
