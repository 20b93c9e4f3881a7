"""View composition: name, eligibility, root and module paths of a view.

Example:
    >>> from pathlib import Path
    >>> from reactorview.core.view import (
    ...     Component, ExecutionContext, SelectionInput, ViewOptions, compose)
    >>> view = compose(
    ...     [Component("a", "jar", Path("/r/a"))],
    ...     SelectionInput(("g:a",)),
    ...     ViewOptions(output_base_directory="views"),
    ...     ExecutionContext(Path("/r"), "4.0.0", "g"),
    ... )
    >>> view.descriptor.modules
    ('../../a',)
"""
from __future__ import annotations

from .composer import compose
from .eligibility import EXCLUDED_PACKAGING, NOT_LEAF, exclusion_reason, is_eligible
from .models import (
    AGGREGATOR_PACKAGING,
    DEFAULT_OUTPUT_BASE_DIRECTORY,
    Component,
    ComposedView,
    ExecutionContext,
    SelectionInput,
    ViewDescriptor,
    ViewOptions,
)
from .naming import derive_view_name, resolve_view_name, strip_coordinate_prefix
from .options import build_view_options, parse_bool, parse_packaging_list
from .paths import relativize, resolve_view_root

__all__ = [
    "AGGREGATOR_PACKAGING",
    "DEFAULT_OUTPUT_BASE_DIRECTORY",
    "EXCLUDED_PACKAGING",
    "NOT_LEAF",
    "Component",
    "ComposedView",
    "ExecutionContext",
    "SelectionInput",
    "ViewDescriptor",
    "ViewOptions",
    "build_view_options",
    "compose",
    "derive_view_name",
    "exclusion_reason",
    "is_eligible",
    "parse_bool",
    "parse_packaging_list",
    "relativize",
    "resolve_view_name",
    "resolve_view_root",
    "strip_coordinate_prefix",
]
