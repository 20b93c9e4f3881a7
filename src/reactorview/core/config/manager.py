"""
reactorview configuration management (layered YAML + environment).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from reactorview.core.exceptions import ConfigurationError
from reactorview.core.schemas import SchemaValidationError, validate_payload
from reactorview.core.utils.io import iter_yaml_files, read_yaml
from reactorview.core.utils.merge import deep_merge
from reactorview.core.utils.paths import (
    ROOT_ENV_VAR,
    get_project_config_dir,
    get_user_config_dir,
    resolve_execution_root,
)
from reactorview.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "REACTORVIEW_"
CONFIG_SCHEMA = "config"


class ConfigManager:
    """Load, merge, and validate reactorview configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: REACTORVIEW_<section>__<key>[__<key>...]
    2. Project config: <execution root>/.reactorview/config/*.yaml (alphabetical order)
    3. User config: ~/.reactorview/config/*.yaml (alphabetical order)
    4. Bundled defaults: reactorview.data/config/*.yaml
    """

    def __init__(self, execution_root: Optional[Path] = None) -> None:
        self.execution_root = Path(execution_root) if execution_root else resolve_execution_root()

        self.core_config_dir = get_data_path("config")
        self.user_config_dir = get_user_config_dir(create=False) / "config"
        self.project_config_dir = get_project_config_dir(self.execution_root, create=False) / "config"

    # ---------- environment overrides ----------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if low in {"null", "none"}:
            return None
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return s
        return s

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key == ROOT_ENV_VAR:
                continue
            raw = key[len(ENV_PREFIX):]
            if "__" not in raw:
                continue
            segments = raw.split("__")
            if any(seg == "" for seg in segments):
                raise ConfigurationError(
                    f"Malformed {ENV_PREFIX}* key: empty segment in '{key}'",
                    context={"key": key},
                )
            yield segments, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur: Dict[str, Any] = root
        for i, part in enumerate(path):
            # Match existing keys case-insensitively so FOO__onlyleafprojects
            # still lands on onlyLeafProjects.
            existing = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key = existing.get(part.lower(), part)
            if i == len(path) - 1:
                cur[key] = value
                return
            nxt = cur.get(key)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[key] = nxt
            cur = nxt

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> Dict[str, Any]:
        out = deep_merge({}, cfg)
        for path, value in self._iter_env_overrides():
            self._set_nested(out, path, value)
        return out

    # ---------- loading ----------

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        """Merge every YAML file of ``directory`` into ``cfg`` (sorted by name)."""
        for path in iter_yaml_files(directory):
            try:
                data = read_yaml(path, default={}, raise_on_error=True) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigurationError(f"Cannot load {path}: {exc}", context={"path": str(path)}) from exc
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"{path} must contain a YAML mapping, got {type(data).__name__}",
                    context={"path": str(path)},
                )
            logger.debug("Merging configuration from %s", path)
            cfg = deep_merge(cfg, data)
        return cfg

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Return the fully merged configuration.

        Raises:
            ConfigurationError: If a file is unreadable or the result violates the schema
        """
        cfg: Dict[str, Any] = {}
        for directory in (self.core_config_dir, self.user_config_dir, self.project_config_dir):
            cfg = self._load_directory(directory, cfg)
        cfg = self.apply_env_overrides(cfg)

        if validate:
            self.validate(cfg)
        return cfg

    def validate(self, cfg: Dict[str, Any]) -> None:
        try:
            validate_payload(cfg, CONFIG_SCHEMA)
        except SchemaValidationError as exc:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(exc.errors),
                context={"errors": exc.errors},
            ) from exc

    def get_all(self) -> Dict[str, Any]:
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-notation key (``"view.outputDir"``)."""
        cur: Any = self.load_config()
        for part in [p for p in key.split(".") if p]:
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


__all__ = ["CONFIG_SCHEMA", "ENV_PREFIX", "ConfigManager"]
