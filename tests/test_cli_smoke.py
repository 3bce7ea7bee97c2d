from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from cli import main

FIXTURES = Path(__file__).parent / "fixtures"
MODULES = FIXTURES / "modules.json"
CYCLIC = FIXTURES / "cyclic.toml"


def test_cli_render_default_output_dir(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["render", str(MODULES), "--root", str(tmp_path)])

    out_dir = tmp_path / ".modgraph"
    assert exit_code == 0
    assert (out_dir / "dependency-graph.mmd").is_file()
    assert (out_dir / "dependency-graph.analysis.json").is_file()
    assert str(out_dir / "dependency-graph.mmd") in capsys.readouterr().out


def test_cli_render_formats_and_out_dir(tmp_path: Path) -> None:
    out_dir = tmp_path / "custom"

    exit_code = main(
        [
            "render",
            str(MODULES),
            "--root",
            str(tmp_path),
            "--out-dir",
            str(out_dir),
            "--format",
            "dot",
            "--format",
            "edgelist",
        ]
    )

    assert exit_code == 0
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "dependency-graph.analysis.json",
        "dependency-graph.dot",
        "dependency-graph.edgelist",
    ]


def test_cli_render_unknown_format(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(
        ["render", str(MODULES), "--root", str(tmp_path), "--format", "svg"]
    )

    assert exit_code == 2
    assert "No renderer registered under 'svg'" in capsys.readouterr().err


def test_cli_analyze_prints_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(
        ["analyze", str(MODULES), "--root", str(tmp_path), "--analyzer", "summary"]
    )

    assert exit_code == 0
    results = orjson.loads(capsys.readouterr().out)
    assert results == {
        "summary": {
            "module_count": 3,
            "edge_count": 2,
            "independent_modules": ["app.db.DatabaseModule", "app.log.LoggerModule"],
            "unused_modules": ["app.user.UserModule"],
            "dangling_targets": [],
            "has_cycles": False,
        }
    }


def test_cli_analyze_fail_on_cycles(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(
        ["analyze", str(CYCLIC), "--root", str(tmp_path), "--fail-on-cycles"]
    )

    captured = capsys.readouterr()
    assert exit_code == 1
    assert orjson.loads(captured.out)["cycles"]["cycles"] == [
        ["app.a.AModule", "app.b.BModule"]
    ]
    assert "circular dependencies" in captured.err


def test_cli_analyze_cycles_without_flag_succeeds(tmp_path: Path) -> None:
    assert main(["analyze", str(CYCLIC), "--root", str(tmp_path)]) == 0


def test_cli_missing_descriptors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["analyze", str(tmp_path / "missing.json"), "--root", str(tmp_path)])

    assert exit_code == 2
    assert "Descriptor file does not exist" in capsys.readouterr().err


def test_cli_invalid_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "modgraph.toml").write_text("bogus = 1", encoding="utf-8")

    exit_code = main(["analyze", str(MODULES), "--root", str(tmp_path)])

    assert exit_code == 2
    assert "Invalid config" in capsys.readouterr().err


def test_cli_config_selects_renderers(tmp_path: Path) -> None:
    (tmp_path / "modgraph.toml").write_text(
        'output_dir = "graphs"\nbasename = "deps"\nrenderers = ["json"]\n',
        encoding="utf-8",
    )

    exit_code = main(["render", str(MODULES), "--root", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "graphs" / "deps.json").is_file()


def test_cli_verify_roundtrip(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["render", str(MODULES), "--root", str(tmp_path)]) == 0
    assert main(["verify", str(MODULES), "--root", str(tmp_path)]) == 0

    (tmp_path / ".modgraph" / "dependency-graph.mmd").write_text("old", encoding="utf-8")
    capsys.readouterr()

    assert main(["verify", str(MODULES), "--root", str(tmp_path)]) == 1
    assert "mismatches: dependency-graph.mmd" in capsys.readouterr().err


def test_cli_verify_missing_out_dir(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["verify", str(MODULES), "--root", str(tmp_path)])

    assert exit_code == 2
    assert "error: Output directory does not exist" in capsys.readouterr().err


def test_cli_formats_lists_renderers(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["formats"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[0] for line in lines] == ["mermaid", "dot", "json", "edgelist"]
    assert lines[0].split("\t")[1:3] == [".mmd", "text/vnd.mermaid"]


def test_cli_verify_with_same_formats_as_render(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    out_dir = tmp_path / "out"
    render_args = ["render", str(MODULES), "--root", str(tmp_path)]
    verify_args = ["verify", str(MODULES), "--root", str(tmp_path)]
    selection = ["--out-dir", str(out_dir), "--format", "dot", "--format", "json"]

    assert main([*render_args, *selection]) == 0
    assert main([*verify_args, *selection]) == 0

    capsys.readouterr()
    assert main([*verify_args, "--out-dir", str(out_dir)]) == 1
    err = capsys.readouterr().err
    assert "missing: dependency-graph.mmd" in err
    assert "extra: dependency-graph.dot" in err
