"""Domain-specific configuration accessors."""
from __future__ import annotations

from .logging import LoggingConfig
from .reactor import ReactorConfig
from .view import ViewConfig

__all__ = ["LoggingConfig", "ReactorConfig", "ViewConfig"]
