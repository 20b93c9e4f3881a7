from __future__ import annotations

import json
from pathlib import Path

import pytest

from reactorview.cli._dispatcher import main


def test_view_name(execution_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["view", "name", "--root", str(execution_root), "-pl", "g:a,g:c"]) == 0

    name, directory = capsys.readouterr().out.strip().split("\t")
    assert name == "a_c_view"
    assert Path(directory) == execution_root.resolve() / "project-views" / "a_c_view"


def test_view_name_explicit_json(execution_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["view", "name", "--root", str(execution_root), "--name", "mine", "--output-dir", "/views", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["viewName"] == "mine"
    assert payload["targetDirectory"] == str(Path("/views") / "mine")


def test_reactor_list(reactor_tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["reactor", "list", "--root", str(reactor_tree), "--json"]) == 0

    rows = json.loads(capsys.readouterr().out)["projects"]
    verdicts = {r["name"]: (r["included"], r["reason"]) for r in rows}
    assert verdicts["platform"] == (False, "not-leaf")
    assert verdicts["services"] == (False, "not-leaf")
    assert verdicts["core"] == (True, None)


def test_reactor_list_text(reactor_tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["reactor", "list", "--root", str(reactor_tree), "--exclude-packaging", "war"]) == 0

    lines = capsys.readouterr().out.splitlines()
    web = next(line for line in lines if line.startswith("com.example:web"))
    assert "skip (excluded-packaging)" in web
    core = next(line for line in lines if line.startswith("com.example:core"))
    assert core.endswith("include")


def test_config_show_key(execution_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "show", "view.outputDir", "--root", str(execution_root)]) == 0
    assert capsys.readouterr().out.strip() == "view.outputDir: project-views"


def test_config_show_json(execution_root: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("REACTORVIEW_view__format", "yaml")
    assert main(["config", "show", "--root", str(execution_root), "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["view"]["format"] == "yaml"


def test_config_show_missing_key(execution_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "show", "view.nothing", "--root", str(execution_root)]) == 1
    assert "Key not found" in capsys.readouterr().out


def test_no_domain_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_domain_without_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["view"]) == 1
    assert "generate" in capsys.readouterr().out


def test_bad_root(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["view", "generate", "--root", str(tmp_path / "absent")]) == 1
    assert "missing path" in capsys.readouterr().err


def test_view_name_with_numeric_environment_values(
    execution_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("REACTORVIEW_view__projectName", "2024")
    monkeypatch.setenv("REACTORVIEW_view__outputDir", "2024")
    monkeypatch.setenv("REACTORVIEW_view__onlyLeafProjects", "no")

    assert main(["view", "name", "--root", str(execution_root), "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["viewName"] == "2024"
    assert payload["targetDirectory"] == str(execution_root.resolve() / "2024" / "2024")
