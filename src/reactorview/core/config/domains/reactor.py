"""Domain-specific configuration for reactor discovery (``reactor`` section)."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class ReactorConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "reactor"

    @cached_property
    def source(self) -> str:
        return str(self.section.get("source") or "pom")

    @cached_property
    def descriptor(self) -> str:
        return str(self.section.get("descriptor") or "pom.xml")

    @cached_property
    def manifest(self) -> str:
        return str(self.section.get("manifest") or "reactor.yaml")


__all__ = ["ReactorConfig"]
