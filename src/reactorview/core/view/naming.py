"""View name derivation."""
from __future__ import annotations

import re
from typing import Iterable, Optional

from .models import SelectionInput

FALLBACK_BASE_NAME = "my-project"
VIEW_NAME_SUFFIX = "_view"
SEGMENT_SEPARATOR = "_"

# Greedy, so everything up to the last ':' or '/' goes.
_COORDINATE_PREFIX = re.compile(r".*[:/]")


def strip_coordinate_prefix(identifier: str) -> str:
    """Keep only the trailing artifact segment of a coordinate string.

    >>> strip_coordinate_prefix("com.example:core")
    'core'
    >>> strip_coordinate_prefix("modules/web/frontend")
    'frontend'
    """
    return _COORDINATE_PREFIX.sub("", identifier)


def derive_view_name(selected_identifiers: Iterable[str]) -> str:
    """Join the stripped identifiers with ``_`` and append ``_view``.

    Identifiers that strip to nothing (``"group:"``) add no segment and no
    separator.
    """
    base = ""
    for identifier in selected_identifiers:
        segment = strip_coordinate_prefix(identifier)
        if base:
            base += SEGMENT_SEPARATOR
        base += segment
    if not base:
        base = FALLBACK_BASE_NAME
    return base + VIEW_NAME_SUFFIX


def resolve_view_name(selection: SelectionInput, *, fallback_explicit: Optional[str] = None) -> str:
    """Return the view's artifact name.

    A non-blank explicit name (from the selection, else ``fallback_explicit``)
    is returned verbatim; otherwise the name is derived from the selected
    identifiers in the order given.
    """
    for explicit in (selection.explicit_view_name, fallback_explicit):
        if explicit is not None and explicit.strip():
            return explicit
    return derive_view_name(selection.selected_identifiers)


__all__ = [
    "FALLBACK_BASE_NAME",
    "VIEW_NAME_SUFFIX",
    "derive_view_name",
    "resolve_view_name",
    "strip_coordinate_prefix",
]
