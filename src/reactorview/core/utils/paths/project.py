"""Project and user configuration directory resolution.

Precedence (highest to lowest) for each directory:
1. Environment variable (``REACTORVIEW_paths__project_config_dir`` /
   ``REACTORVIEW_paths__user_config_dir``)
2. Default ``.reactorview`` name

The project directory is resolved below the execution root, the user
directory below the home directory, unless an absolute path is given.
"""
from __future__ import annotations

import os
from pathlib import Path

DEFAULT_PROJECT_CONFIG_PRIMARY = ".reactorview"
DEFAULT_USER_CONFIG_PRIMARY = ".reactorview"

PROJECT_DIR_ENV = "REACTORVIEW_paths__project_config_dir"
USER_DIR_ENV = "REACTORVIEW_paths__user_config_dir"


def _env_dir(name: str) -> str | None:
    value = os.environ.get(name)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_project_config_dir(execution_root: Path, *, create: bool = False) -> Path:
    """Return the project-level configuration directory."""
    name = _env_dir(PROJECT_DIR_ENV) or DEFAULT_PROJECT_CONFIG_PRIMARY
    path = Path(name).expanduser()
    if not path.is_absolute():
        path = Path(execution_root) / path
    if create:
        path.mkdir(parents=True, exist_ok=True)
    return path


def get_user_config_dir(*, create: bool = False) -> Path:
    """Return the user-level configuration directory."""
    name = _env_dir(USER_DIR_ENV) or DEFAULT_USER_CONFIG_PRIMARY
    path = Path(name).expanduser()
    if not path.is_absolute():
        path = Path.home() / path
    if create:
        path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = [
    "DEFAULT_PROJECT_CONFIG_PRIMARY",
    "DEFAULT_USER_CONFIG_PRIMARY",
    "PROJECT_DIR_ENV",
    "USER_DIR_ENV",
    "get_project_config_dir",
    "get_user_config_dir",
]
