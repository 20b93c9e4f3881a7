"""Domain-specific configuration for view generation (``view`` section)."""
from __future__ import annotations

from functools import cached_property
from typing import Any, Optional

from reactorview.core.descriptor import FORMATS
from reactorview.core.exceptions import ConfigurationError
from reactorview.core.view import ViewOptions, build_view_options
from reactorview.core.view.models import DEFAULT_OUTPUT_BASE_DIRECTORY

from ..base import BaseDomainConfig


class ViewConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "view"

    @cached_property
    def output_dir(self) -> str:
        value = self.section.get("outputDir")
        return DEFAULT_OUTPUT_BASE_DIRECTORY if value is None else str(value)

    @cached_property
    def only_leaf_projects(self) -> Any:
        return self.section.get("onlyLeafProjects", True)

    @cached_property
    def exclude_packaging(self) -> Any:
        return self.section.get("excludePackaging") or []

    @cached_property
    def project_name(self) -> Optional[str]:
        value = self.section.get("projectName")
        return None if value is None else str(value)

    @cached_property
    def format(self) -> str:
        fmt = str(self.section.get("format") or "pom")
        if fmt not in FORMATS:
            raise ConfigurationError(f"view.format must be one of {', '.join(FORMATS)}, got {fmt!r}")
        return fmt

    def to_options(
        self,
        *,
        only_leaf_projects: Any = None,
        excluded_packaging_types: Any = None,
        output_base_directory: Optional[str] = None,
        explicit_view_name: Optional[str] = None,
    ) -> ViewOptions:
        """Build ViewOptions from this section; non-None arguments win."""
        return build_view_options(
            only_leaf_projects=self.only_leaf_projects if only_leaf_projects is None else only_leaf_projects,
            excluded_packaging_types=(
                self.exclude_packaging if excluded_packaging_types is None else excluded_packaging_types
            ),
            output_base_directory=output_base_directory or self.output_dir,
            explicit_view_name=explicit_view_name or self.project_name,
        )


__all__ = ["ViewConfig"]
