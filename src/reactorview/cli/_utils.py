"""Shared CLI plumbing: from parsed arguments to the inputs of view composition."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from reactorview.core.config import ReactorConfig, ViewConfig
from reactorview.core.reactor import Reactor, load_reactor, parse_selectors, select_projects
from reactorview.core.utils.paths import resolve_execution_root
from reactorview.core.view import Component, SelectionInput, ViewOptions


def get_execution_root(args: argparse.Namespace) -> Path:
    """Get the execution root from ``--root`` or auto-detect it."""
    return resolve_execution_root(getattr(args, "root", None))


@dataclass(frozen=True)
class ViewInputs:
    """Everything a view command needs, resolved from flags and configuration."""

    reactor: Reactor
    components: Tuple[Component, ...]
    selection: SelectionInput
    options: ViewOptions
    descriptor_format: str


def load_view_inputs(args: argparse.Namespace, *, restrict: bool = True) -> ViewInputs:
    """Resolve the reactor, selection and options for a view command.

    With ``restrict`` the reactor is narrowed to the ``-pl`` selection (the
    whole reactor when nothing is selected).
    """
    root = get_execution_root(args)
    view_cfg = ViewConfig(execution_root=root)
    reactor_cfg = ReactorConfig(execution_root=root)

    manifest = getattr(args, "manifest", None)
    if manifest:
        reactor = load_reactor(root, source="manifest", manifest=manifest)
    else:
        reactor = load_reactor(
            root,
            source=reactor_cfg.source,
            descriptor=reactor_cfg.descriptor,
            manifest=reactor_cfg.manifest,
        )

    selectors = parse_selectors(getattr(args, "projects", None))
    components = reactor.components
    if restrict:
        components = select_projects(components, selectors, root)

    options = view_cfg.to_options(
        only_leaf_projects=getattr(args, "only_leaf", None),
        excluded_packaging_types=getattr(args, "exclude_packaging", None),
        output_base_directory=getattr(args, "output_dir", None),
        explicit_view_name=getattr(args, "view_name", None),
    )
    selection = SelectionInput(
        selected_identifiers=selectors,
        explicit_view_name=getattr(args, "view_name", None),
    )
    return ViewInputs(
        reactor=reactor,
        components=tuple(components),
        selection=selection,
        options=options,
        descriptor_format=getattr(args, "descriptor_format", None) or view_cfg.format,
    )


__all__ = ["ViewInputs", "get_execution_root", "load_view_inputs"]
