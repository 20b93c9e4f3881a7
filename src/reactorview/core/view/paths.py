"""View root resolution and module path relativization.

Neither function checks the filesystem: the view root usually does not
exist yet when a view is composed, and component directories only need to be
spelled consistently with it.
"""
from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Union

from .models import ExecutionContext, ViewOptions

PathInput = Union[str, "os.PathLike[str]"]


def resolve_view_root(options: ViewOptions, context: ExecutionContext, view_name: str) -> Path:
    """Return the directory the view descriptor is written into.

    An absolute ``output_base_directory`` places the view anywhere on the
    filesystem; a relative one is taken below the execution root.
    """
    candidate = Path(options.output_base_directory) / view_name
    if candidate.is_absolute():
        return candidate
    return Path(context.execution_root_directory) / options.output_base_directory / view_name


def relativize(component_base_directory: PathInput, view_root: PathInput) -> str:
    """Return the path of ``component_base_directory`` as seen from ``view_root``.

    Climbs out of the view root with ``..`` segments as needed. The result
    always uses ``/`` separators so the descriptor is portable; ``"."`` means
    the component lives at the view root itself.

    >>> relativize("/r/a", "/r/views/a_view")
    '../../a'
    """
    relative = os.path.relpath(os.fspath(component_base_directory), os.fspath(view_root))
    return PurePath(relative).as_posix()


__all__ = ["resolve_view_root", "relativize"]
