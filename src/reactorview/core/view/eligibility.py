"""Which reactor components make it into a view.

Two rules, checked in this order, first match wins:

1. ``not-leaf``: ``only_leaf_projects`` is set and the component declares
   sub-modules of its own (an organizational node, not a buildable leaf).
2. ``excluded-packaging``: the component's packaging type is excluded.
"""
from __future__ import annotations

from typing import Optional

from .models import Component, ViewOptions

NOT_LEAF = "not-leaf"
EXCLUDED_PACKAGING = "excluded-packaging"


def exclusion_reason(component: Component, options: ViewOptions) -> Optional[str]:
    """Return why ``component`` is left out of the view, or None when it is included."""
    if options.only_leaf_projects and component.submodule_count > 0:
        return NOT_LEAF
    if component.packaging in options.excluded_packaging_types:
        return EXCLUDED_PACKAGING
    return None


def is_eligible(component: Component, options: ViewOptions) -> bool:
    return exclusion_reason(component, options) is None


__all__ = ["NOT_LEAF", "EXCLUDED_PACKAGING", "exclusion_reason", "is_eligible"]
