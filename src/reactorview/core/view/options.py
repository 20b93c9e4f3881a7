"""Parse raw option values (config files, env vars, CLI flags) into ViewOptions.

Malformed values raise ConfigurationError here, before composition runs.
"""
from __future__ import annotations

import re
from typing import Any, FrozenSet, Iterable, Optional, Union

from reactorview.core.exceptions import ConfigurationError

from .models import DEFAULT_OUTPUT_BASE_DIRECTORY, ViewOptions

_PACKAGING_TYPE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.+-]*$")

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def parse_packaging_list(value: Union[None, str, Iterable[Any]]) -> FrozenSet[str]:
    """Parse an exclusion list such as ``"pom, war"`` or ``["pom", "war"]``.

    Blank entries (``"pom,,war"``, trailing commas) are ignored; entries that
    are not plain packaging identifiers are rejected.
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        raw_items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        raw_items = value
    else:
        raise ConfigurationError(
            f"Packaging exclusion list must be a string or a list, got {type(value).__name__}",
            context={"value": repr(value)},
        )

    out = set()
    for item in raw_items:
        if not isinstance(item, str):
            raise ConfigurationError(
                f"Packaging type must be a string, got {type(item).__name__}: {item!r}",
                context={"value": repr(value)},
            )
        text = item.strip()
        if not text:
            continue
        if not _PACKAGING_TYPE.match(text):
            raise ConfigurationError(
                f"Malformed packaging type in exclusion list: {text!r}",
                context={"value": repr(value), "entry": text},
            )
        out.add(text)
    return frozenset(out)


def parse_bool(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        low = value.strip().lower()
        if low in _TRUE:
            return True
        if low in _FALSE:
            return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}", context={"option": name})


def build_view_options(
    *,
    only_leaf_projects: Any = True,
    excluded_packaging_types: Union[None, str, Iterable[Any]] = None,
    output_base_directory: Optional[str] = None,
    explicit_view_name: Optional[str] = None,
) -> ViewOptions:
    """Validate raw values and assemble an immutable ViewOptions."""
    output = DEFAULT_OUTPUT_BASE_DIRECTORY if output_base_directory is None else str(output_base_directory)
    if not output.strip():
        raise ConfigurationError("Output directory must not be blank", context={"option": "outputDir"})

    name = explicit_view_name
    if name is not None and not str(name).strip():
        name = None

    return ViewOptions(
        only_leaf_projects=parse_bool(only_leaf_projects, name="onlyLeafProjects"),
        excluded_packaging_types=parse_packaging_list(excluded_packaging_types),
        output_base_directory=output,
        explicit_view_name=None if name is None else str(name),
    )


__all__ = ["build_view_options", "parse_bool", "parse_packaging_list"]
