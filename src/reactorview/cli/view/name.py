"""
reactorview view name command.

SUMMARY: Show the name and directory a view would get

Resolves only the view name and root; the reactor is not read.
"""

from __future__ import annotations

import argparse
import sys

from reactorview.cli import OutputFormatter, add_selection_args, add_standard_flags, get_execution_root
from reactorview.core.config import ViewConfig
from reactorview.core.reactor import parse_selectors
from reactorview.core.view import ExecutionContext, SelectionInput, resolve_view_name, resolve_view_root

SUMMARY = "Show the name and directory a view would get"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_selection_args(parser)
    parser.add_argument(
        "--output-dir",
        help="Base directory for generated views (absolute, or relative to the execution root)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    root = get_execution_root(args)
    options = ViewConfig(execution_root=root).to_options(
        output_base_directory=args.output_dir,
        explicit_view_name=args.view_name,
    )
    selection = SelectionInput(
        selected_identifiers=parse_selectors(args.projects),
        explicit_view_name=args.view_name,
    )
    name = resolve_view_name(selection, fallback_explicit=options.explicit_view_name)
    # Only the execution root matters for the location.
    context = ExecutionContext(execution_root_directory=root, model_version="", group_id="")
    view_root = resolve_view_root(options, context, name)

    formatter.success(
        {"viewName": name, "targetDirectory": str(view_root)},
        f"{name}\t{view_root}",
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
