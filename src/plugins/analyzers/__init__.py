"""Analyzer plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plugins.analyzers.base import Analyzer, AnalyzerRegistry, run_analyzers
from plugins.analyzers.coupling import CouplingAnalyzer
from plugins.analyzers.cycles import CycleAnalyzer
from plugins.analyzers.depth import DepthAnalyzer
from plugins.analyzers.fan import FanAnalyzer, compute_fan_stats
from plugins.analyzers.summary import SummaryAnalyzer

if TYPE_CHECKING:
    from settings.config import ModGraphConfig


def default_analyzers(config: ModGraphConfig | None = None) -> AnalyzerRegistry:
    """Build a registry holding the built-in analyzers."""
    registry = AnalyzerRegistry()
    analyzers: list[Analyzer] = [
        SummaryAnalyzer(),
        CouplingAnalyzer(
            threshold=config.coupling.threshold,
            max_services_length=config.coupling.max_services_length,
        )
        if config
        else CouplingAnalyzer(),
        CycleAnalyzer(),
        FanAnalyzer(top_n=config.fan.top_n) if config else FanAnalyzer(),
        DepthAnalyzer(),
    ]
    for analyzer in analyzers:
        registry.register(analyzer.name, analyzer)
    return registry


__all__ = [
    "Analyzer",
    "AnalyzerRegistry",
    "CouplingAnalyzer",
    "CycleAnalyzer",
    "DepthAnalyzer",
    "FanAnalyzer",
    "SummaryAnalyzer",
    "compute_fan_stats",
    "default_analyzers",
    "run_analyzers",
]
