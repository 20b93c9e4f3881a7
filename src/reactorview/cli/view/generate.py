"""
reactorview view generate command.

SUMMARY: Generate a view descriptor for the selected projects

Discovers the reactor below the execution root, narrows it to the projects
selected with -pl, and writes an aggregator descriptor that lists the
eligible projects as modules relative to the view directory.
"""

from __future__ import annotations

import argparse
import sys

from reactorview.cli import (
    OutputFormatter,
    add_dry_run_flag,
    add_format_arg,
    add_reactor_source_args,
    add_selection_args,
    add_standard_flags,
    add_view_option_args,
    load_view_inputs,
)
from reactorview.core.descriptor import render_descriptor
from reactorview.core.generate import generate_view

SUMMARY = "Generate a view descriptor for the selected projects"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_selection_args(parser)
    add_view_option_args(parser)
    add_reactor_source_args(parser)
    add_format_arg(parser)
    add_dry_run_flag(parser)
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when the descriptor cannot be written",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    inputs = load_view_inputs(args)
    result = generate_view(
        inputs.components,
        inputs.selection,
        inputs.options,
        inputs.reactor.context,
        fmt=inputs.descriptor_format,
        dry_run=bool(getattr(args, "dry_run", False)),
    )
    descriptor = result.view.descriptor

    if formatter.json_mode:
        formatter.json_output({"status": "success" if result.ok else "write_failed", **result.to_dict()})
    elif getattr(args, "dry_run", False):
        formatter.text(f"Would write {result.descriptor_path}:")
        formatter.text(render_descriptor(descriptor, inputs.descriptor_format).rstrip())
    elif result.written:
        formatter.text(
            f"Generated {result.descriptor_path} ({len(descriptor.modules)} module(s))"
        )
    else:
        formatter.text(f"View {descriptor.artifact_id} was composed but not written: {result.error}")

    if not result.ok and getattr(args, "strict", False):
        return 1
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
