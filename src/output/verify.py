"""Determinism verification for written outputs."""

from __future__ import annotations

import filecmp
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from output.write import generate_outputs

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph
    from settings.config import ModGraphConfig


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    mismatches: tuple[str, ...] = field(default_factory=tuple)
    missing: tuple[str, ...] = field(default_factory=tuple)
    extra: tuple[str, ...] = field(default_factory=tuple)


def _list_relative_files(root: Path) -> set[Path]:
    return {path.relative_to(root) for path in root.rglob("*") if path.is_file()}


def verify_outputs(
    *,
    graph: DependencyGraph,
    config: ModGraphConfig,
    out_dir: Path,
    formats: list[str] | None = None,
) -> DeterminismResult:
    """Check that previously written outputs match a fresh generation.

    Regenerates into a temporary directory and compares byte-for-byte against
    ``out_dir``, using relative paths for the file set comparison.

    Raises:
        FileNotFoundError: If out_dir does not exist.
        NotADirectoryError: If out_dir is not a directory.
    """
    if not out_dir.exists():
        msg = f"Output directory does not exist: {out_dir}"
        raise FileNotFoundError(msg)
    if not out_dir.is_dir():
        msg = f"Output path is not a directory: {out_dir}"
        raise NotADirectoryError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        generate_outputs(graph=graph, config=config, out_dir=temp_path, formats=formats)

        original_files = _list_relative_files(out_dir)
        regenerated_files = _list_relative_files(temp_path)

        missing = sorted(str(path) for path in regenerated_files - original_files)
        extra = sorted(str(path) for path in original_files - regenerated_files)

        mismatches = [
            str(path)
            for path in sorted(original_files & regenerated_files)
            if not filecmp.cmp(out_dir / path, temp_path / path, shallow=False)
        ]

    ok = not missing and not extra and not mismatches
    return DeterminismResult(
        ok=ok,
        mismatches=tuple(mismatches),
        missing=tuple(missing),
        extra=tuple(extra),
    )


__all__ = ["DeterminismResult", "verify_outputs"]
