from __future__ import annotations

from pathlib import Path

import pytest

from reactorview.core.config import LoggingConfig, ReactorConfig, ViewConfig
from reactorview.core.exceptions import ConfigurationError


def _project_config(root: Path, text: str) -> None:
    config_dir = root / ".reactorview" / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "project.yaml").write_text(text, encoding="utf-8")


def test_view_config_defaults(execution_root: Path) -> None:
    cfg = ViewConfig(execution_root=execution_root)
    assert cfg.output_dir == "project-views"
    assert cfg.only_leaf_projects is True
    assert cfg.project_name is None
    assert cfg.format == "pom"

    options = cfg.to_options()
    assert options.only_leaf_projects is True
    assert options.excluded_packaging_types == frozenset()
    assert options.output_base_directory == "project-views"


def test_view_config_from_project_file(execution_root: Path) -> None:
    _project_config(
        execution_root,
        "view:\n  outputDir: views\n  onlyLeafProjects: false\n  excludePackaging: 'pom, war'\n  projectName: slice\n",
    )
    options = ViewConfig(execution_root=execution_root).to_options()

    assert options.output_base_directory == "views"
    assert options.only_leaf_projects is False
    assert options.excluded_packaging_types == frozenset({"pom", "war"})
    assert options.explicit_view_name == "slice"


def test_overrides_win_over_configuration(execution_root: Path) -> None:
    _project_config(execution_root, "view:\n  outputDir: views\n  excludePackaging: [pom]\n")
    options = ViewConfig(execution_root=execution_root).to_options(
        only_leaf_projects=False,
        excluded_packaging_types=["war"],
        output_base_directory="elsewhere",
        explicit_view_name="cli",
    )
    assert options.only_leaf_projects is False
    assert options.excluded_packaging_types == frozenset({"war"})
    assert options.output_base_directory == "elsewhere"
    assert options.explicit_view_name == "cli"


def test_malformed_exclusion_list_fails_before_composition(execution_root: Path) -> None:
    _project_config(execution_root, "view:\n  excludePackaging: 'pom, not valid'\n")
    with pytest.raises(ConfigurationError, match="Malformed packaging type"):
        ViewConfig(execution_root=execution_root).to_options()


def test_reactor_config(execution_root: Path) -> None:
    _project_config(execution_root, "reactor:\n  source: manifest\n  manifest: views.yaml\n")
    cfg = ReactorConfig(execution_root=execution_root)
    assert cfg.source == "manifest"
    assert cfg.manifest == "views.yaml"
    assert cfg.descriptor == "pom.xml"


def test_logging_config(execution_root: Path) -> None:
    _project_config(execution_root, "logging:\n  level: debug\n  file: logs/reactorview.log\n")
    cfg = LoggingConfig(execution_root=execution_root)
    assert cfg.level == "DEBUG"
    assert cfg.log_path == execution_root / "logs" / "reactorview.log"


def test_logging_config_without_file(execution_root: Path) -> None:
    assert LoggingConfig(execution_root=execution_root).log_path is None


def test_numeric_and_word_values_from_environment(execution_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REACTORVIEW_view__projectName", "2024")
    monkeypatch.setenv("REACTORVIEW_view__outputDir", "2024")
    monkeypatch.setenv("REACTORVIEW_view__onlyLeafProjects", "no")

    options = ViewConfig(execution_root=execution_root).to_options()

    assert options.explicit_view_name == "2024"
    assert options.output_base_directory == "2024"
    assert options.only_leaf_projects is False


def test_numeric_project_name_from_yaml(execution_root: Path) -> None:
    _project_config(execution_root, "view:\n  projectName: 2024\n  onlyLeafProjects: 'off'\n")
    cfg = ViewConfig(execution_root=execution_root)
    assert cfg.project_name == "2024"
    assert cfg.to_options().only_leaf_projects is False


def test_unparsable_leaf_flag_is_rejected(execution_root: Path) -> None:
    _project_config(execution_root, "view:\n  onlyLeafProjects: sometimes\n")
    with pytest.raises(ConfigurationError, match="onlyLeafProjects must be a boolean"):
        ViewConfig(execution_root=execution_root).to_options()
