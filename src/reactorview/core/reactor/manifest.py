"""Load a reactor from a YAML (or JSON) manifest.

For trees that are not Maven builds, the component list can be written down
directly::

    modelVersion: 4.0.0
    groupId: com.example
    components:
      - name: core
        packaging: jar
        baseDirectory: modules/core
      - name: platform
        packaging: pom
        baseDirectory: platform
        submodules: 2

Relative base directories resolve against the manifest's directory.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from reactorview.core.exceptions import ReactorError, ReactorNotFoundError
from reactorview.core.schemas import SchemaValidationError, validate_payload
from reactorview.core.view.models import Component, ExecutionContext

from .models import Reactor
from .pom import DEFAULT_MODEL_VERSION, DEFAULT_PACKAGING

logger = logging.getLogger(__name__)

MANIFEST_SCHEMA = "reactor"


def _component_from_entry(entry: Dict[str, Any], base: Path, group_id: str) -> Component:
    directory = Path(entry["baseDirectory"]).expanduser()
    if not directory.is_absolute():
        directory = base / directory
    return Component(
        name=entry["name"],
        packaging=entry.get("packaging") or DEFAULT_PACKAGING,
        base_directory=Path(os.path.normpath(directory)),
        submodule_count=int(entry.get("submodules", 0)),
        group_id=entry.get("groupId") or group_id,
        artifact_id=entry.get("artifactId") or entry["name"],
    )


def load_manifest(path: Path, *, execution_root: Optional[Path] = None) -> Reactor:
    """Read and validate a reactor manifest.

    Raises:
        ReactorNotFoundError: If the manifest file does not exist
        ReactorError: If it cannot be parsed or fails schema validation
    """
    path = Path(path)
    if not path.is_file():
        raise ReactorNotFoundError(f"Reactor manifest not found: {path}", context={"path": str(path)})

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ReactorError(f"Cannot parse reactor manifest {path}: {exc}", context={"path": str(path)}) from exc

    try:
        validate_payload(data, MANIFEST_SCHEMA)
    except SchemaValidationError as exc:
        raise ReactorError(
            f"Invalid reactor manifest {path}: " + "; ".join(exc.errors),
            context={"path": str(path), "errors": exc.errors},
        ) from exc

    base = path.resolve().parent
    group_id = data["groupId"]
    components: List[Component] = [
        _component_from_entry(entry, base, group_id) for entry in data.get("components") or []
    ]
    logger.info("Loaded %d project(s) from %s", len(components), path)

    context = ExecutionContext(
        execution_root_directory=Path(execution_root) if execution_root else base,
        model_version=str(data.get("modelVersion") or DEFAULT_MODEL_VERSION),
        group_id=group_id,
    )
    return Reactor(components=tuple(components), context=context)


__all__ = ["MANIFEST_SCHEMA", "load_manifest"]
