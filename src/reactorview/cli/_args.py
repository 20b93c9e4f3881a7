"""Common CLI argument registration utilities.

Reusable argument registration functions shared by the command modules.
"""
from __future__ import annotations

import argparse

from reactorview.core.descriptor import FORMATS


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --root flag for execution root override."""
    parser.add_argument(
        "--root",
        type=str,
        help="Execution root directory (default: $REACTORVIEW_ROOT or the current directory)",
    )


def add_dry_run_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        help="Show what would be done without making changes",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (debug) logging",
    )


def add_selection_args(parser: argparse.ArgumentParser) -> None:
    """Add project selection (-pl) and the explicit view name."""
    parser.add_argument(
        "-pl",
        "--projects",
        action="append",
        default=None,
        metavar="SELECTORS",
        help="Comma-separated projects to include ([groupId]:artifactId or relative path); repeatable",
    )
    parser.add_argument(
        "--name",
        dest="view_name",
        help="Explicit view name (default: derived from the selected projects)",
    )


def add_view_option_args(parser: argparse.ArgumentParser) -> None:
    """Add the options that shape a view (filters and output location)."""
    parser.add_argument(
        "--output-dir",
        help="Base directory for generated views (absolute, or relative to the execution root)",
    )
    parser.add_argument(
        "--exclude-packaging",
        help="Comma-separated packaging types to leave out (e.g. 'pom,war')",
    )
    leaf = parser.add_mutually_exclusive_group()
    leaf.add_argument(
        "--only-leaf",
        dest="only_leaf",
        action="store_true",
        default=None,
        help="Only add projects without sub-modules (default)",
    )
    leaf.add_argument(
        "--all-projects",
        dest="only_leaf",
        action="store_false",
        default=None,
        help="Also add projects that declare sub-modules",
    )


def add_reactor_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--manifest",
        help="Load the reactor from this YAML/JSON manifest instead of pom.xml files",
    )


def add_format_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        dest="descriptor_format",
        choices=list(FORMATS),
        default=None,
        help="Descriptor format (default: view.format from configuration)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json, --root and --verbose."""
    add_json_flag(parser)
    add_root_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_root_flag",
    "add_dry_run_flag",
    "add_verbose_flag",
    "add_selection_args",
    "add_view_option_args",
    "add_reactor_source_args",
    "add_format_arg",
    "add_standard_flags",
]
