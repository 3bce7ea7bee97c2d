"""Normalized module descriptors supplied by the host application.

The graph only ever sees :class:`ModuleDescriptor` values, whose export and
import fields are always present. Host classes that expose optional
``exports()`` / ``imports()`` capabilities are normalized by
:func:`describe_module`.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from graph.models import ImportSpec
from utils import qualified_name


class DescriptorError(Exception):
    """Raised when a descriptor document cannot be read or validated."""


class ModuleDescriptor(BaseModel):
    """A module as declared by the host: identifier, exports and imports."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    exports: tuple[str, ...] = Field(default_factory=tuple)
    imports: tuple[ImportSpec, ...] = Field(default_factory=tuple)


class DescriptorDocument(BaseModel):
    """Top-level shape of a descriptor file."""

    model_config = ConfigDict(extra="forbid")

    modules: list[ModuleDescriptor] = Field(default_factory=list)


@runtime_checkable
class ExportsServices(Protocol):
    """Host capability: the module makes services available."""

    @classmethod
    def exports(cls) -> list[str]: ...


@runtime_checkable
class ImportsServices(Protocol):
    """Host capability: the module requests services from other modules."""

    @classmethod
    def imports(cls) -> list[ImportSpec]: ...


def describe_module(module_cls: type, name: str | None = None) -> ModuleDescriptor:
    """Normalize a host module class into a descriptor.

    Missing capabilities produce empty export or import lists. ``exports``
    and ``imports`` are called on the class itself, so hosts must define them
    as classmethods or staticmethods.
    """
    exports: list[str] = []
    imports: list[ImportSpec] = []
    if isinstance(module_cls, ExportsServices):
        exports = list(module_cls.exports())
    if isinstance(module_cls, ImportsServices):
        imports = list(module_cls.imports())
    return ModuleDescriptor(
        name=name or qualified_name(module_cls),
        exports=tuple(exports),
        imports=tuple(imports),
    )


def _read_document(path: Path) -> Any:
    if path.suffix == ".toml":
        with path.open("rb") as f:
            return tomllib.load(f)
    return orjson.loads(path.read_bytes())


def load_descriptors(path: Path) -> list[ModuleDescriptor]:
    """Load module descriptors from a JSON or TOML document.

    Raises:
        DescriptorError: If the file is missing, malformed or does not match
            the descriptor schema.
    """
    if not path.is_file():
        msg = f"Descriptor file does not exist: {path}"
        raise DescriptorError(msg)

    try:
        data = _read_document(path)
    except (orjson.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        msg = f"Invalid descriptor document {path}: {e}"
        raise DescriptorError(msg) from e

    try:
        document = DescriptorDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid descriptors in {path}: {e}"
        raise DescriptorError(msg) from e

    return document.modules


__all__ = [
    "DescriptorDocument",
    "DescriptorError",
    "ExportsServices",
    "ImportsServices",
    "ModuleDescriptor",
    "describe_module",
    "load_descriptors",
]
