from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graph.models import DEFAULT_COUPLING_THRESHOLD, DEFAULT_MAX_SERVICES_LENGTH
from utils import DEFAULT_SEPARATOR

CONFIG_FILENAME = "modgraph.toml"


class CouplingConfig(BaseModel):
    """Thresholds for coupling analysis and edge labels."""

    model_config = ConfigDict(extra="forbid")

    threshold: int = Field(
        default=DEFAULT_COUPLING_THRESHOLD,
        ge=0,
        description="Edges importing more services than this are strong couplings",
    )
    max_services_length: int = Field(
        default=DEFAULT_MAX_SERVICES_LENGTH,
        ge=4,
        description="Maximum length of a formatted service list",
    )


class FanConfig(BaseModel):
    """Configuration for fan-in / fan-out statistics."""

    model_config = ConfigDict(extra="forbid")

    top_n: int = Field(
        default=10,
        ge=1,
        description="Number of most depended-upon modules to report",
    )


class ModGraphConfig(BaseModel):
    """Configuration for modgraph-core analysis and rendering."""

    model_config = ConfigDict(extra="forbid")

    output_dir: str = Field(
        default=".modgraph",
        description="Output directory for rendered graphs and analysis results",
    )
    basename: str = Field(
        default="dependency-graph",
        description="File name stem for rendered outputs",
    )
    namespace_separator: str = Field(
        default=DEFAULT_SEPARATOR,
        min_length=1,
        description="Separator between namespace segments of module identifiers",
    )
    renderers: list[str] = Field(
        default_factory=lambda: ["mermaid"],
        description="Renderers to run by default",
    )
    analyzers: list[str] = Field(
        default_factory=list,
        description="Analyzers to run (empty = all registered analyzers)",
    )
    coupling: CouplingConfig = Field(default_factory=CouplingConfig)
    fan: FanConfig = Field(default_factory=FanConfig)

    @field_validator("basename")
    @classmethod
    def validate_basename(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            msg = "basename must be a non-empty file name without separators"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_output_dir(root: Path, output_dir: str) -> Path:
    """Resolve a config-provided output_dir safely within the project root.

    The config output_dir must be a non-empty relative path that remains
    within the root after resolution. Absolute paths and paths that escape
    the root are rejected.
    """
    if not output_dir:
        msg = "output_dir must be a non-empty relative path"
        raise ConfigError(msg)

    if output_dir.startswith("~"):
        msg = "output_dir must be a relative path within the project root"
        raise ConfigError(msg)

    output_path = Path(output_dir)
    if output_path.is_absolute():
        msg = "output_dir must be a relative path within the project root"
        raise ConfigError(msg)

    try:
        resolved_root = root.resolve()
        resolved_output = (resolved_root / output_path).resolve()
    except OSError as exc:
        msg = f"Failed to resolve output_dir '{output_dir}': {exc}"
        raise ConfigError(msg) from exc

    try:
        resolved_output.relative_to(resolved_root)
    except ValueError as exc:
        msg = f"output_dir '{output_dir}' escapes the project root"
        raise ConfigError(msg) from exc

    return resolved_output


def load_config(root: Path) -> ModGraphConfig:
    """Load configuration from modgraph.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return ModGraphConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ModGraphConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
