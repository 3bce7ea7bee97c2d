from __future__ import annotations

from pathlib import Path

import pytest

from collect.descriptors import DescriptorError, load_descriptors


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_json_descriptors(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "modules.json",
        """
{
  "modules": [
    {"name": "app.db.Database", "exports": ["Connection", "QueryBuilder"]},
    {
      "name": "app.user.User",
      "exports": ["UserService"],
      "imports": [{"module_name": "app.db.Database", "items_to_import": ["Connection"]}]
    }
  ]
}
""",
    )

    descriptors = load_descriptors(path)

    assert [d.name for d in descriptors] == ["app.db.Database", "app.user.User"]
    assert descriptors[0].imports == ()
    assert descriptors[1].imports[0].module_name == "app.db.Database"
    assert descriptors[1].imports[0].items_to_import == ("Connection",)


def test_load_toml_descriptors(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "modules.toml",
        """
[[modules]]
name = "app.log.Logger"
exports = ["Logger"]

[[modules]]
name = "app.user.User"

[[modules.imports]]
module_name = "app.log.Logger"
items_to_import = ["Logger"]
""".strip(),
    )

    descriptors = load_descriptors(path)

    assert [d.name for d in descriptors] == ["app.log.Logger", "app.user.User"]
    assert descriptors[1].exports == ()
    assert descriptors[1].imports[0].module_name == "app.log.Logger"


def test_missing_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(DescriptorError, match="does not exist"):
        load_descriptors(tmp_path / "nope.json")


def test_malformed_json_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path / "modules.json", "{not json")

    with pytest.raises(DescriptorError):
        load_descriptors(path)


def test_malformed_toml_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path / "modules.toml", "[[modules]\nname =")

    with pytest.raises(DescriptorError):
        load_descriptors(path)


def test_unknown_descriptor_key_rejected(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "modules.json",
        '{"modules": [{"name": "a", "bogus": true}]}',
    )

    with pytest.raises(DescriptorError):
        load_descriptors(path)


def test_empty_module_name_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path / "modules.json", '{"modules": [{"name": ""}]}')

    with pytest.raises(DescriptorError):
        load_descriptors(path)


def test_empty_document_yields_no_modules(tmp_path: Path) -> None:
    path = _write(tmp_path / "modules.json", "{}")

    assert load_descriptors(path) == []
