"""Immutable records flowing through view composition.

Every record is created by a collaborator (reactor discovery, option parsing,
the CLI) before composition starts and is never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, NamedTuple, Optional, Tuple

AGGREGATOR_PACKAGING = "aggregator"
DEFAULT_OUTPUT_BASE_DIRECTORY = "project-views"


@dataclass(frozen=True)
class Component:
    """One buildable unit of the reactor."""

    name: str
    packaging: str
    base_directory: Path
    submodule_count: int = 0
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.submodule_count == 0

    @property
    def coordinates(self) -> str:
        """``groupId:artifactId`` when known, else the bare name."""
        artifact = self.artifact_id or self.name
        if self.group_id:
            return f"{self.group_id}:{artifact}"
        return artifact


@dataclass(frozen=True)
class SelectionInput:
    """The projects selected for an invocation (``-pl a,b``) and an optional name."""

    selected_identifiers: Tuple[str, ...] = ()
    explicit_view_name: Optional[str] = None


@dataclass(frozen=True)
class ViewOptions:
    only_leaf_projects: bool = True
    excluded_packaging_types: FrozenSet[str] = field(default_factory=frozenset)
    output_base_directory: str = DEFAULT_OUTPUT_BASE_DIRECTORY
    explicit_view_name: Optional[str] = None


@dataclass(frozen=True)
class ExecutionContext:
    """Host-supplied facts: where the build runs and what the view inherits."""

    execution_root_directory: Path
    model_version: str
    group_id: str


@dataclass(frozen=True)
class ViewDescriptor:
    """The synthetic aggregator that lists the view's modules."""

    model_version: str
    group_id: str
    artifact_id: str
    modules: Tuple[str, ...] = ()
    packaging: str = AGGREGATOR_PACKAGING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modelVersion": self.model_version,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "packaging": self.packaging,
            "modules": list(self.modules),
        }


class ComposedView(NamedTuple):
    """Result of :func:`reactorview.core.view.composer.compose`."""

    descriptor: ViewDescriptor
    target_directory: Path


__all__ = [
    "AGGREGATOR_PACKAGING",
    "DEFAULT_OUTPUT_BASE_DIRECTORY",
    "Component",
    "SelectionInput",
    "ViewOptions",
    "ExecutionContext",
    "ViewDescriptor",
    "ComposedView",
]
