"""Persist view descriptors.

The writer is the only component that touches the filesystem on the output
side; every failure surfaces as DescriptorWriteError so callers can decide
whether to retry, report or abort.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict

from reactorview.core.exceptions import ConfigurationError, DescriptorWriteError
from reactorview.core.utils.io import dump_yaml_string, write_text
from reactorview.core.view.models import ViewDescriptor

from .pom import render_pom

logger = logging.getLogger(__name__)


def render_yaml(descriptor: ViewDescriptor) -> str:
    return dump_yaml_string(descriptor.to_dict(), sort_keys=False)


_RENDERERS: Dict[str, Callable[[ViewDescriptor], str]] = {
    "pom": render_pom,
    "yaml": render_yaml,
}

DESCRIPTOR_FILENAMES: Dict[str, str] = {
    "pom": "pom.xml",
    "yaml": "view.yaml",
}

FORMATS = tuple(_RENDERERS)


def _check_format(fmt: str) -> None:
    if fmt not in _RENDERERS:
        raise ConfigurationError(
            f"Unknown descriptor format: {fmt!r} (expected one of {', '.join(FORMATS)})",
            context={"format": fmt},
        )


def descriptor_path(target_directory: Path, fmt: str = "pom") -> Path:
    """Return the file a descriptor of format ``fmt`` is written to."""
    _check_format(fmt)
    return Path(target_directory) / DESCRIPTOR_FILENAMES[fmt]


def render_descriptor(descriptor: ViewDescriptor, fmt: str = "pom") -> str:
    _check_format(fmt)
    return _RENDERERS[fmt](descriptor)


def write_descriptor(descriptor: ViewDescriptor, target_directory: Path, fmt: str = "pom") -> Path:
    """Write ``descriptor`` below ``target_directory`` and return the file path.

    Missing parent directories are created; the file is replaced atomically.

    Raises:
        ConfigurationError: If ``fmt`` is unknown
        DescriptorWriteError: If the file cannot be written
    """
    path = descriptor_path(target_directory, fmt)
    content = render_descriptor(descriptor, fmt)
    try:
        write_text(path, content)
    except OSError as exc:
        raise DescriptorWriteError(f"Cannot write {path}: {exc}", path=str(path)) from exc
    logger.debug("Wrote %d module(s) to %s", len(descriptor.modules), path)
    return path


__all__ = [
    "DESCRIPTOR_FILENAMES",
    "FORMATS",
    "descriptor_path",
    "render_descriptor",
    "render_yaml",
    "write_descriptor",
]
