"""reactorview configuration: layered YAML, environment overrides, typed sections."""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .domains import LoggingConfig, ReactorConfig, ViewConfig
from .manager import CONFIG_SCHEMA, ENV_PREFIX, ConfigManager

__all__ = [
    "CONFIG_SCHEMA",
    "ENV_PREFIX",
    "BaseDomainConfig",
    "ConfigManager",
    "LoggingConfig",
    "ReactorConfig",
    "ViewConfig",
    "clear_all_caches",
    "get_cached_config",
]
