"""Configuration for modgraph-core."""

from settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    CouplingConfig,
    FanConfig,
    ModGraphConfig,
    load_config,
    resolve_output_dir,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "CouplingConfig",
    "FanConfig",
    "ModGraphConfig",
    "load_config",
    "resolve_output_dir",
]
