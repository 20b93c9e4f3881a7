"""Discover a Maven reactor by walking ``<modules>`` from a root ``pom.xml``.

Only what view composition needs is read: coordinates, name, packaging and
the declared modules. Property interpolation, profiles and dependency
ordering are out of scope; components are listed parent first, children in
declaration order.
"""
from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set, Tuple

from reactorview.core.exceptions import ReactorError, ReactorNotFoundError
from reactorview.core.view.models import Component, ExecutionContext

from .models import Reactor

logger = logging.getLogger(__name__)

POM_FILENAME = "pom.xml"
DEFAULT_MODEL_VERSION = "4.0.0"
DEFAULT_PACKAGING = "jar"


@dataclass(frozen=True)
class PomProject:
    path: Path
    artifact_id: str
    group_id: Optional[str]
    parent_group_id: Optional[str]
    name: Optional[str]
    packaging: str
    model_version: Optional[str]
    modules: Tuple[str, ...]


def _local(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _child(elem: ET.Element, name: str) -> Optional[ET.Element]:
    for child in elem:
        if _local(child.tag) == name:
            return child
    return None


def _text(elem: Optional[ET.Element], name: str) -> Optional[str]:
    if elem is None:
        return None
    child = _child(elem, name)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    return text or None


def parse_pom(path: Path) -> PomProject:
    """Parse the parts of one ``pom.xml`` that matter for views.

    Raises:
        ReactorError: If the file is not well-formed XML or lacks an artifactId
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise ReactorError(f"Cannot parse {path}: {exc}", context={"path": str(path)}) from exc
    except OSError as exc:
        raise ReactorError(f"Cannot read {path}: {exc}", context={"path": str(path)}) from exc

    if _local(root.tag) != "project":
        raise ReactorError(f"{path} is not a Maven project descriptor", context={"path": str(path)})

    artifact_id = _text(root, "artifactId")
    if not artifact_id:
        raise ReactorError(f"{path} does not declare an artifactId", context={"path": str(path)})

    modules_elem = _child(root, "modules")
    modules: List[str] = []
    if modules_elem is not None:
        for module in modules_elem:
            if _local(module.tag) == "module" and module.text and module.text.strip():
                modules.append(module.text.strip())

    return PomProject(
        path=path,
        artifact_id=artifact_id,
        group_id=_text(root, "groupId"),
        parent_group_id=_text(_child(root, "parent"), "groupId"),
        name=_text(root, "name"),
        packaging=_text(root, "packaging") or DEFAULT_PACKAGING,
        model_version=_text(root, "modelVersion"),
        modules=tuple(modules),
    )


def _module_pom(parent_pom: Path, module: str) -> Path:
    candidate = Path(os.path.normpath(parent_pom.parent / module))
    if candidate.is_dir():
        candidate = candidate / POM_FILENAME
    if not candidate.is_file():
        raise ReactorError(
            f"Child module {candidate} of {parent_pom} does not exist",
            context={"module": module, "parent": str(parent_pom)},
        )
    return candidate


def discover_pom_reactor(root_pom: Path, *, execution_root: Optional[Path] = None) -> Reactor:
    """Walk the module tree below ``root_pom`` and return the reactor.

    ``root_pom`` may be the descriptor itself or the directory holding it.
    The root project supplies the model version and group id views inherit.

    Raises:
        ReactorNotFoundError: If the root descriptor does not exist
        ReactorError: If any descriptor in the tree is invalid or missing
    """
    root_pom = Path(root_pom)
    if root_pom.is_dir():
        root_pom = root_pom / POM_FILENAME
    if not root_pom.is_file():
        raise ReactorNotFoundError(
            f"No reactor descriptor found at {root_pom}", context={"path": str(root_pom)}
        )
    root_pom = root_pom.resolve()

    root_project = parse_pom(root_pom)
    group_id = root_project.group_id or root_project.parent_group_id
    if not group_id:
        raise ReactorError(f"{root_pom} declares no groupId", context={"path": str(root_pom)})

    components: List[Component] = []
    visited: Set[Path] = set()

    def visit(pom_path: Path, project: PomProject, inherited_group: Optional[str]) -> None:
        visited.add(pom_path)
        component_group = project.group_id or project.parent_group_id or inherited_group
        components.append(
            Component(
                name=project.name or project.artifact_id,
                packaging=project.packaging,
                base_directory=pom_path.parent,
                submodule_count=len(project.modules),
                group_id=component_group,
                artifact_id=project.artifact_id,
            )
        )
        for module in project.modules:
            child = _module_pom(pom_path, module)
            if child in visited:
                logger.warning("Skipping %s: already part of the reactor", child)
                continue
            visit(child, parse_pom(child), component_group)

    visit(root_pom, root_project, None)

    logger.info("Discovered %d project(s) below %s", len(components), root_pom.parent)
    context = ExecutionContext(
        execution_root_directory=Path(execution_root) if execution_root else root_pom.parent,
        model_version=root_project.model_version or DEFAULT_MODEL_VERSION,
        group_id=group_id,
    )
    return Reactor(components=tuple(components), context=context)


__all__ = [
    "DEFAULT_MODEL_VERSION",
    "DEFAULT_PACKAGING",
    "POM_FILENAME",
    "PomProject",
    "discover_pom_reactor",
    "parse_pom",
]
