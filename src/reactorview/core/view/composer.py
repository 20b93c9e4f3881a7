"""Compose a view descriptor from reactor components."""
from __future__ import annotations

import logging
from typing import Iterable, List

from .eligibility import exclusion_reason
from .models import (
    AGGREGATOR_PACKAGING,
    Component,
    ComposedView,
    ExecutionContext,
    SelectionInput,
    ViewDescriptor,
    ViewOptions,
)
from .naming import resolve_view_name
from .paths import relativize, resolve_view_root

logger = logging.getLogger(__name__)


def compose(
    components: Iterable[Component],
    selection: SelectionInput,
    options: ViewOptions,
    context: ExecutionContext,
) -> ComposedView:
    """Build the view descriptor and the directory it belongs in.

    Components are visited once, in the order given; every eligible one
    contributes exactly one module path, relative to the view root. Two
    components that resolve to the same path both appear.
    """
    view_name = resolve_view_name(selection, fallback_explicit=options.explicit_view_name)
    view_root = resolve_view_root(options, context, view_name)

    modules: List[str] = []
    for component in components:
        reason = exclusion_reason(component, options)
        if reason is not None:
            logger.debug("Not adding module %s (%s): %s", component.name, component.packaging, reason)
            continue
        logger.debug("Adding module %s (%s)", component.name, component.packaging)
        modules.append(relativize(component.base_directory, view_root))

    descriptor = ViewDescriptor(
        model_version=context.model_version,
        group_id=context.group_id,
        artifact_id=view_name,
        modules=tuple(modules),
        packaging=AGGREGATOR_PACKAGING,
    )
    return ComposedView(descriptor=descriptor, target_directory=view_root)


__all__ = ["compose"]
