"""Path utilities for reactorview.

- Resolver: execution root resolution
- Project: project/user configuration directory detection
"""
from __future__ import annotations

from .project import (
    DEFAULT_PROJECT_CONFIG_PRIMARY,
    DEFAULT_USER_CONFIG_PRIMARY,
    get_project_config_dir,
    get_user_config_dir,
)
from .resolver import (
    ROOT_ENV_VAR,
    ReactorViewPathError,
    resolve_execution_root,
)

__all__ = [
    "ROOT_ENV_VAR",
    "ReactorViewPathError",
    "resolve_execution_root",
    "DEFAULT_PROJECT_CONFIG_PRIMARY",
    "DEFAULT_USER_CONFIG_PRIMARY",
    "get_project_config_dir",
    "get_user_config_dir",
]
