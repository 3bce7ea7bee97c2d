"""Utility functions for writing outputs."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from pathlib import Path


def _to_serializable(obj: object) -> object:
    """orjson ``default`` hook for models returned by third-party analyzers."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    msg = f"Type is not JSON serializable: {type(obj).__name__}"
    raise TypeError(msg)


def dump_json(obj: object) -> bytes:
    """Serialize analysis results as sorted, indented JSON bytes."""
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE
    return orjson.dumps(obj, default=_to_serializable, option=opts)


def _write_json(path: Path, obj: object) -> None:
    path.write_bytes(dump_json(obj))


def _write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8", newline="\n")


__all__ = ["dump_json"]
