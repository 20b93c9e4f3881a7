"""Execution root resolution.

The execution root is the directory a build is launched from; the default
view output directory and project-level configuration are located relative
to it.

Resolution priority:
1. Explicit path passed by the caller (``--root``)
2. ``REACTORVIEW_ROOT`` environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from reactorview.core.exceptions import ReactorViewError

ROOT_ENV_VAR = "REACTORVIEW_ROOT"


class ReactorViewPathError(ReactorViewError, ValueError):
    """Raised when the execution root cannot be resolved."""

    def __init__(self, message: str = "", *, context=None) -> None:
        ReactorViewError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


def resolve_execution_root(explicit: Optional[os.PathLike | str] = None) -> Path:
    """Resolve the execution root directory with fail-fast validation.

    Raises:
        ReactorViewPathError: If the chosen directory does not exist or is a file
    """
    source = "--root"
    candidate: Optional[str] = str(explicit) if explicit else None
    if candidate is None:
        env_root = os.environ.get(ROOT_ENV_VAR)
        if env_root and env_root.strip():
            candidate = env_root.strip()
            source = ROOT_ENV_VAR
    if candidate is None:
        return Path.cwd().resolve()

    path = Path(candidate).expanduser().resolve()
    if not path.exists():
        raise ReactorViewPathError(
            f"{source} points at missing path: {path}", context={"path": str(path)}
        )
    if not path.is_dir():
        raise ReactorViewPathError(
            f"{source} is not a directory: {path}", context={"path": str(path)}
        )
    return path


__all__ = ["ROOT_ENV_VAR", "ReactorViewPathError", "resolve_execution_root"]
