"""Process-local configuration cache.

Domain configs share one merged configuration per execution root. The cache
key includes a fingerprint of REACTORVIEW_* environment variables and of the
project/user config files, so edits made during a process are picked up.
"""
from __future__ import annotations

import copy
import hashlib
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from reactorview.core.utils.io import iter_yaml_files
from reactorview.core.utils.paths import (
    get_project_config_dir,
    get_user_config_dir,
    resolve_execution_root,
)

_config_cache: Dict[str, Dict[str, Any]] = {}


def _fingerprint_dir(d: Path) -> List[Tuple[str, int, int]]:
    files: List[Tuple[str, int, int]] = []
    for p in iter_yaml_files(d):
        try:
            st = p.stat()
            files.append((p.name, int(st.st_mtime_ns), int(st.st_size)))
        except OSError:
            files.append((p.name, 0, 0))
    return files


def _cache_key(execution_root: Path) -> str:
    env_items = sorted(
        (k, os.environ.get(k, "")) for k in os.environ.keys() if k.startswith("REACTORVIEW_")
    )
    dirs = (
        get_project_config_dir(execution_root) / "config",
        get_user_config_dir() / "config",
    )
    fingerprint = repr((env_items, [_fingerprint_dir(d) for d in dirs]))
    digest = hashlib.sha256(fingerprint.encode("utf-8")).hexdigest()[:16]
    return f"{execution_root}:{digest}"


def get_cached_config(execution_root: Optional[Path] = None) -> Dict[str, Any]:
    """Return the merged configuration for ``execution_root`` (a private copy)."""
    from .manager import ConfigManager

    root = Path(execution_root).expanduser().resolve() if execution_root else resolve_execution_root()
    key = _cache_key(root)
    if key not in _config_cache:
        _config_cache[key] = ConfigManager(root).load_config()
    return copy.deepcopy(_config_cache[key])


def clear_all_caches() -> None:
    _config_cache.clear()


__all__ = ["clear_all_caches", "get_cached_config"]
