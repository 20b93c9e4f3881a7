"""Restrict a reactor to the projects selected with ``-pl``.

A selector is ``groupId:artifactId``, ``:artifactId``, a bare artifactId or
a directory relative to the execution root. The restricted list keeps
reactor order; nothing is added for dependencies.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Sequence, Set, Tuple, Union

from reactorview.core.exceptions import ProjectSelectionError
from reactorview.core.view.models import Component


def parse_selectors(value: Union[None, str, Iterable[str]]) -> Tuple[str, ...]:
    """Split ``"a,b"`` (or several such strings) into selectors, dropping blanks."""
    if value is None:
        return ()
    chunks = [value] if isinstance(value, str) else list(value)
    out: List[str] = []
    for chunk in chunks:
        for part in str(chunk).split(","):
            part = part.strip()
            if part:
                out.append(part)
    return tuple(out)


def matches_selector(component: Component, selector: str, execution_root: Path) -> bool:
    artifact_id = component.artifact_id or component.name
    if ":" in selector:
        group, _, artifact = selector.rpartition(":")
        if artifact != artifact_id:
            return False
        return not group or group == component.group_id
    if selector == artifact_id:
        return True
    selected_dir = os.path.normpath(Path(execution_root) / selector)
    return selected_dir == os.path.normpath(component.base_directory)


def select_projects(
    components: Sequence[Component],
    selectors: Sequence[str],
    execution_root: Path,
) -> Tuple[Component, ...]:
    """Return the components matched by any selector, in reactor order.

    An empty selector list selects the whole reactor.

    Raises:
        ProjectSelectionError: If a selector matches no component
    """
    if not selectors:
        return tuple(components)

    chosen: Set[int] = set()
    for selector in selectors:
        hits = [i for i, c in enumerate(components) if matches_selector(c, selector, execution_root)]
        if not hits:
            raise ProjectSelectionError(
                f"Could not find the selected project in the reactor: {selector}",
                context={"selector": selector},
            )
        chosen.update(hits)
    return tuple(c for i, c in enumerate(components) if i in chosen)


__all__ = ["matches_selector", "parse_selectors", "select_projects"]
