"""Command-line interface for modgraph-core."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from collect.collector import GraphCollector
from collect.descriptors import DescriptorError, load_descriptors
from collect.factory import ModuleNodeFactory
from output.utils import dump_json
from output.verify import verify_outputs
from output.write import generate_outputs
from plugins.analyzers import default_analyzers, run_analyzers
from plugins.registry import PluginNotFoundError
from plugins.renderers import default_renderers
from settings.config import ConfigError, load_config, resolve_output_dir

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph
    from settings.config import ModGraphConfig


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "descriptors",
        help="Module descriptor file (.json or .toml)",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding modgraph.toml (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modgraph")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render", help="Render the graph and write analysis results"
    )
    _add_common_args(render_parser)
    render_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory (default: config output dir)",
    )
    render_parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        default=None,
        help="Renderer to run; repeatable (default: config renderers)",
    )

    analyze_parser = subparsers.add_parser(
        "analyze", help="Print analysis results as JSON"
    )
    _add_common_args(analyze_parser)
    analyze_parser.add_argument(
        "--analyzer",
        dest="analyzers",
        action="append",
        default=None,
        help="Analyzer to run; repeatable (default: config analyzers, else all)",
    )
    analyze_parser.add_argument(
        "--fail-on-cycles",
        action="store_true",
        help="Exit with status 1 when the graph has circular dependencies",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify that written outputs are up to date"
    )
    _add_common_args(verify_parser)
    verify_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory (default: config output dir)",
    )
    verify_parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        default=None,
        help="Renderer the outputs were written with; repeatable "
        "(default: config renderers)",
    )

    subparsers.add_parser("formats", help="List available renderers")

    return parser


def _resolve_out_dir(root: Path, config: ModGraphConfig, out_dir: str | None) -> Path:
    if out_dir is None:
        return resolve_output_dir(root, config.output_dir)
    return Path(out_dir).expanduser().resolve()


def _build_graph(descriptors: str, config: ModGraphConfig) -> DependencyGraph:
    collector = GraphCollector(
        factory=ModuleNodeFactory(separator=config.namespace_separator)
    )
    return collector.collect(load_descriptors(Path(descriptors).expanduser()))


def _handle_render(args: argparse.Namespace, root: Path, config: ModGraphConfig) -> int:
    graph = _build_graph(args.descriptors, config)
    out_dir = _resolve_out_dir(root, config, args.out_dir)
    result = generate_outputs(
        graph=graph, config=config, out_dir=out_dir, formats=args.formats
    )
    for path in result["outputs"]:
        sys.stdout.write(f"{path}\n")
    return 0


def _handle_analyze(args: argparse.Namespace, config: ModGraphConfig) -> int:
    graph = _build_graph(args.descriptors, config)
    names = args.analyzers or config.analyzers or None
    results = run_analyzers(graph, default_analyzers(config), names)
    sys.stdout.write(dump_json(results).decode("utf-8"))
    if args.fail_on_cycles and graph.has_cycles():
        sys.stderr.write("error: circular dependencies detected\n")
        return 1
    return 0


def _handle_verify(args: argparse.Namespace, root: Path, config: ModGraphConfig) -> int:
    graph = _build_graph(args.descriptors, config)
    out_dir = _resolve_out_dir(root, config, args.out_dir)
    try:
        result = verify_outputs(
            graph=graph, config=config, out_dir=out_dir, formats=args.formats
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        sys.stderr.write(f"out-dir: {out_dir}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for label, paths in (
            ("missing", result.missing),
            ("extra", result.extra),
            ("mismatches", result.mismatches),
        ):
            for path in paths:
                sys.stderr.write(f"{label}: {path}\n")
        return 1
    return 0


def _handle_formats(config: ModGraphConfig) -> int:
    for name, renderer in default_renderers(config).items():
        sys.stdout.write(
            f"{name}\t.{renderer.file_extension}\t{renderer.mime_type}\t"
            f"{renderer.description}\n"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(getattr(args, "root", ".")).expanduser().resolve()

    try:
        config = load_config(root)

        if args.command == "render":
            return _handle_render(args, root, config)

        if args.command == "analyze":
            return _handle_analyze(args, config)

        if args.command == "verify":
            return _handle_verify(args, root, config)

        if args.command == "formats":
            return _handle_formats(config)
    except (ConfigError, DescriptorError, PluginNotFoundError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
