from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

import pytest

from reactorview.core.view import ExecutionContext, ViewOptions, relativize, resolve_view_root


def _context(root: Path) -> ExecutionContext:
    return ExecutionContext(execution_root_directory=root, model_version="4.0.0", group_id="g")


class TestResolveViewRoot:
    def test_relative_output_dir_is_below_execution_root(self, tmp_path: Path) -> None:
        options = ViewOptions(output_base_directory="views")
        assert resolve_view_root(options, _context(tmp_path), "a_view") == tmp_path / "views" / "a_view"

    def test_absolute_output_dir_ignores_execution_root(self, tmp_path: Path) -> None:
        elsewhere = tmp_path / "elsewhere"
        options = ViewOptions(output_base_directory=str(elsewhere))
        first = resolve_view_root(options, _context(tmp_path / "one"), "a_view")
        second = resolve_view_root(options, _context(tmp_path / "two"), "a_view")
        assert first == second == elsewhere / "a_view"

    def test_default_output_dir(self, tmp_path: Path) -> None:
        assert resolve_view_root(ViewOptions(), _context(tmp_path), "v") == tmp_path / "project-views" / "v"

    def test_does_not_create_directories(self, tmp_path: Path) -> None:
        root = resolve_view_root(ViewOptions(), _context(tmp_path), "v")
        assert not root.exists()


class TestRelativize:
    def test_sibling_of_view_base(self, tmp_path: Path) -> None:
        view_root = tmp_path / "views" / "a_c_view"
        assert relativize(tmp_path / "a", view_root) == "../../a"

    def test_component_below_view_root(self, tmp_path: Path) -> None:
        view_root = tmp_path / "views"
        assert relativize(tmp_path / "views" / "nested" / "m", view_root) == "nested/m"

    def test_same_directory(self, tmp_path: Path) -> None:
        assert relativize(tmp_path, tmp_path) == "."

    def test_paths_need_not_exist(self, tmp_path: Path) -> None:
        missing = tmp_path / "does" / "not" / "exist"
        assert relativize(missing, tmp_path / "nope") == "../does/not/exist"

    def test_uses_forward_slashes(self, tmp_path: Path) -> None:
        result = relativize(tmp_path / "x" / "y" / "z", tmp_path / "v" / "w")
        assert "\\" not in result
        assert result == "../../x/y/z"

    @pytest.mark.parametrize(
        ("component", "view_root"),
        [
            ("a", "views/a_view"),
            ("deep/tree/of/modules/m", "project-views/m_view"),
            ("views/a_view/inner", "views/a_view"),
            ("x", "x"),
        ],
    )
    def test_resolving_relative_path_against_root_gives_component_back(
        self, tmp_path: Path, component: str, view_root: str
    ) -> None:
        component_dir = tmp_path / component
        root_dir = tmp_path / view_root
        relative = relativize(component_dir, root_dir)
        assert os.path.normpath(root_dir / PurePosixPath(relative)) == os.path.normpath(component_dir)
