"""Process-wide logging setup for the reactorview CLI.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed here, once per process, by the CLI entry point.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from reactorview.core.utils.io import ensure_directory

_STDERR_HANDLER: logging.Handler | None = None
_FILE_HANDLER: logging.Handler | None = None
_CONFIGURED_LOG_PATH: str | None = None
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
STDERR_FORMAT = "[%(levelname)s] %(message)s"


def level_from_name(name: str) -> int:
    """Map a level name (``"debug"``, ``"INFO"``...) to its numeric value."""
    value = getattr(logging, str(name).upper(), None)
    if isinstance(value, int):
        return value
    return logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Path | None = None) -> None:
    """Install the reactorview stderr handler and an optional file handler.

    Idempotent per-process: calling it again only adjusts levels and swaps the
    file handler when ``log_path`` changes.
    """
    global _STDERR_HANDLER, _FILE_HANDLER, _CONFIGURED_LOG_PATH

    numeric = level_from_name(level)
    root = logging.getLogger("reactorview")
    root.setLevel(numeric)

    if _STDERR_HANDLER is None:
        _STDERR_HANDLER = logging.StreamHandler(sys.stderr)
        _STDERR_HANDLER.setFormatter(logging.Formatter(STDERR_FORMAT))
        root.addHandler(_STDERR_HANDLER)
    _STDERR_HANDLER.setLevel(numeric)

    if log_path is None:
        return

    resolved = str(Path(log_path).expanduser().resolve())
    if _CONFIGURED_LOG_PATH == resolved and _FILE_HANDLER is not None:
        _FILE_HANDLER.setLevel(numeric)
        return

    if _FILE_HANDLER is not None:
        root.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None

    ensure_directory(Path(resolved).parent)
    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(numeric)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

    _FILE_HANDLER = fh
    _CONFIGURED_LOG_PATH = resolved


def suppress_lastresort_in_json_mode() -> None:
    """Keep stdlib logging's lastResort handler from writing into JSON output.

    Ensures the root logger has at least a NullHandler when it otherwise has
    none.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


def reset_logging_for_tests() -> None:
    """Test-only: drop every handler installed by this module."""
    global _STDERR_HANDLER, _FILE_HANDLER, _CONFIGURED_LOG_PATH
    root = logging.getLogger("reactorview")
    for h in (_STDERR_HANDLER, _FILE_HANDLER):
        if h is None:
            continue
        root.removeHandler(h)
        h.close()
    root.setLevel(logging.NOTSET)
    _STDERR_HANDLER = None
    _FILE_HANDLER = None
    _CONFIGURED_LOG_PATH = None


__all__ = [
    "configure_logging",
    "level_from_name",
    "reset_logging_for_tests",
    "suppress_lastresort_in_json_mode",
]
