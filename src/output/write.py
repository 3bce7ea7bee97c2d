from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from output.utils import _write_json, _write_text
from plugins.analyzers import default_analyzers, run_analyzers
from plugins.renderers import default_renderers

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from graph.dependency_graph import DependencyGraph
    from plugins.analyzers import AnalyzerRegistry
    from plugins.renderers import Renderer, RendererRegistry
    from settings.config import ModGraphConfig

logger = logging.getLogger(__name__)

ANALYSIS_SUFFIX = ".analysis.json"


def write_renderings(
    graph: DependencyGraph,
    renderers: Iterable[Renderer],
    out_dir: Path,
    basename: str,
) -> list[Path]:
    """Render the graph with each renderer into ``<basename>.<extension>``."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for renderer in renderers:
        path = out_dir / f"{basename}.{renderer.file_extension}"
        _write_text(path, renderer.render(graph))
        logger.info("Wrote %s (%s)", path, renderer.mime_type)
        written.append(path)
    return written


def write_analysis(results: dict[str, Any], path: Path) -> Path:
    """Write analyzer results as sorted, indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _write_json(path, results)
    logger.info("Wrote %s", path)
    return path


def generate_outputs(
    *,
    graph: DependencyGraph,
    config: ModGraphConfig,
    out_dir: Path,
    analyzers: AnalyzerRegistry | None = None,
    renderers: RendererRegistry | None = None,
    formats: list[str] | None = None,
) -> dict[str, Any]:
    """Run configured analyzers and renderers and write their outputs.

    Args:
        graph: Fully assembled dependency graph
        config: Configuration selecting analyzers, renderers and file names
        out_dir: Directory receiving the outputs
        analyzers: Analyzer registry (built-ins when omitted)
        renderers: Renderer registry (built-ins when omitted)
        formats: Renderer names overriding ``config.renderers``

    Returns:
        Dictionary with graph counts and the list of written paths.

    Raises:
        PluginNotFoundError: If a selected analyzer or renderer is unknown.
    """
    if analyzers is None:
        analyzers = default_analyzers(config)
    if renderers is None:
        renderers = default_renderers(config)

    selected_renderers = [
        renderers.get(name) for name in (formats or config.renderers)
    ]
    results = run_analyzers(graph, analyzers, config.analyzers or None)

    written = write_renderings(graph, selected_renderers, out_dir, config.basename)
    written.append(
        write_analysis(results, out_dir / f"{config.basename}{ANALYSIS_SUFFIX}")
    )

    return {
        "module_count": graph.get_module_count(),
        "edge_count": graph.get_edge_count(),
        "has_cycles": graph.has_cycles(),
        "analyzers": sorted(results),
        "outputs": [str(path) for path in written],
    }


__all__ = [
    "ANALYSIS_SUFFIX",
    "generate_outputs",
    "write_analysis",
    "write_renderings",
]
