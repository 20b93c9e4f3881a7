"""
reactorview reactor list command.

SUMMARY: List reactor projects and whether a view would include them
"""

from __future__ import annotations

import argparse
import sys

from reactorview.cli import (
    OutputFormatter,
    add_reactor_source_args,
    add_selection_args,
    add_standard_flags,
    add_view_option_args,
    load_view_inputs,
)
from reactorview.core.view import exclusion_reason

SUMMARY = "List reactor projects and whether a view would include them"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_selection_args(parser)
    add_view_option_args(parser)
    add_reactor_source_args(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    inputs = load_view_inputs(args)
    rows = []
    for component in inputs.components:
        reason = exclusion_reason(component, inputs.options)
        rows.append(
            {
                "name": component.name,
                "coordinates": component.coordinates,
                "packaging": component.packaging,
                "baseDirectory": str(component.base_directory),
                "submodules": component.submodule_count,
                "included": reason is None,
                "reason": reason,
            }
        )

    if formatter.json_mode:
        formatter.json_output({"projects": rows})
        return 0

    if not rows:
        formatter.text("No projects in the reactor.")
        return 0
    width = max(len(r["coordinates"]) for r in rows)
    for r in rows:
        verdict = "include" if r["included"] else f"skip ({r['reason']})"
        formatter.text(f"{r['coordinates']:<{width}}  {r['packaging']:<8}  {verdict}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
