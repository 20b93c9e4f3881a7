"""Reactor discovery: turn a project tree into an ordered component list."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from reactorview.core.exceptions import ConfigurationError

from .manifest import load_manifest
from .models import Reactor
from .pom import POM_FILENAME, discover_pom_reactor, parse_pom
from .selection import matches_selector, parse_selectors, select_projects

SOURCES = ("pom", "manifest")


def load_reactor(
    execution_root: Path,
    *,
    source: str = "pom",
    descriptor: str = POM_FILENAME,
    manifest: Optional[str] = None,
) -> Reactor:
    """Load the reactor below ``execution_root`` using the chosen strategy.

    ``descriptor`` and ``manifest`` are resolved against the execution root
    unless absolute.
    """
    root = Path(execution_root)
    if source == "pom":
        return discover_pom_reactor(root / descriptor, execution_root=root)
    if source == "manifest":
        if not manifest:
            raise ConfigurationError("reactor.manifest must be set when reactor.source is 'manifest'")
        return load_manifest(root / manifest, execution_root=root)
    raise ConfigurationError(
        f"Unknown reactor source: {source!r} (expected one of {', '.join(SOURCES)})",
        context={"source": source},
    )


__all__ = [
    "POM_FILENAME",
    "SOURCES",
    "Reactor",
    "discover_pom_reactor",
    "load_manifest",
    "load_reactor",
    "matches_selector",
    "parse_pom",
    "parse_selectors",
    "select_projects",
]
