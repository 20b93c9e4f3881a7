"""View descriptor serialization (Maven POM or YAML)."""
from __future__ import annotations

from .pom import POM_NAMESPACE, build_pom_element, render_pom
from .writer import (
    DESCRIPTOR_FILENAMES,
    FORMATS,
    descriptor_path,
    render_descriptor,
    render_yaml,
    write_descriptor,
)

__all__ = [
    "DESCRIPTOR_FILENAMES",
    "FORMATS",
    "POM_NAMESPACE",
    "build_pom_element",
    "descriptor_path",
    "render_descriptor",
    "render_pom",
    "render_yaml",
    "write_descriptor",
]
