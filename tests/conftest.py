import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'reactorview' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.cache_utils import reset_reactorview_caches
from helpers.pom import make_reactor_tree

from reactorview.core.view import Component, ExecutionContext


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Fresh caches, no REACTORVIEW_* leakage and a throwaway home directory."""
    for key in list(os.environ):
        if key.startswith("REACTORVIEW_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "_home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    reset_reactorview_caches()
    yield
    reset_reactorview_caches()


@pytest.fixture
def execution_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty execution root that is also the current directory."""
    root = tmp_path / "repo"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def reactor_tree(execution_root: Path) -> Path:
    """A small Maven reactor written below the execution root."""
    make_reactor_tree(execution_root)
    return execution_root


@pytest.fixture
def scenario_components() -> list[Component]:
    return [
        Component(name="a", packaging="jar", base_directory=Path("/r/a"), submodule_count=0),
        Component(name="b", packaging="pom", base_directory=Path("/r/b"), submodule_count=2),
        Component(name="c", packaging="jar", base_directory=Path("/r/c"), submodule_count=0),
    ]


@pytest.fixture
def scenario_context() -> ExecutionContext:
    return ExecutionContext(
        execution_root_directory=Path("/r"),
        model_version="4.0.0",
        group_id="g",
    )
