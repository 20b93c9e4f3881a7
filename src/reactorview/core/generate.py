"""Generate a view: compose it, then persist the descriptor.

Persistence failures do not abort generation. They are logged and reported
on the result, and the composed view is returned either way so callers can
retry writing on their own.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from reactorview.core.descriptor import descriptor_path, write_descriptor
from reactorview.core.exceptions import DescriptorWriteError
from reactorview.core.view import (
    Component,
    ComposedView,
    ExecutionContext,
    SelectionInput,
    ViewOptions,
    compose,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    view: ComposedView
    descriptor_path: Path
    written: bool
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "viewName": self.view.descriptor.artifact_id,
            "targetDirectory": str(self.view.target_directory),
            "descriptorPath": str(self.descriptor_path),
            "written": self.written,
            "error": self.error,
            "descriptor": self.view.descriptor.to_dict(),
        }


def generate_view(
    components: Iterable[Component],
    selection: SelectionInput,
    options: ViewOptions,
    context: ExecutionContext,
    *,
    fmt: str = "pom",
    dry_run: bool = False,
) -> GenerationResult:
    """Compose the view and, unless ``dry_run``, write its descriptor."""
    view = compose(components, selection, options, context)
    path = descriptor_path(view.target_directory, fmt)

    if dry_run:
        logger.info("Dry run: not writing %s", path)
        return GenerationResult(view=view, descriptor_path=path, written=False)

    try:
        write_descriptor(view.descriptor, view.target_directory, fmt)
    except DescriptorWriteError as exc:
        logger.error("Cannot write %s: %s", path, exc)
        return GenerationResult(view=view, descriptor_path=path, written=False, error=str(exc))

    logger.info("Generated %s", path)
    return GenerationResult(view=view, descriptor_path=path, written=True)


__all__ = ["GenerationResult", "generate_view"]
