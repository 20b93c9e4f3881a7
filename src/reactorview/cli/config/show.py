"""
reactorview config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, user and project
overrides, and REACTORVIEW_* environment variables.
"""

from __future__ import annotations

import argparse
import sys

from reactorview.cli import OutputFormatter, add_json_flag, add_root_flag, get_execution_root
from reactorview.core.config import ConfigManager
from reactorview.core.utils.io import dump_yaml_string

SUMMARY = "Show current configuration"

_MISSING = object()


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'view.outputDir')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml", "table"],
        default="table",
        help="Output format (default: table)",
    )
    add_json_flag(parser)
    add_root_flag(parser)


def _format_value(value, indent: int = 0) -> str:
    """Format a value for table display."""
    prefix = "  " * indent
    if isinstance(value, dict):
        lines = []
        for k, v in value.items():
            formatted = _format_value(v, indent + 1)
            if "\n" in formatted:
                lines.append(f"{prefix}{k}:")
                lines.append(formatted)
            else:
                lines.append(f"{prefix}{k}: {formatted}")
        return "\n".join(lines)
    elif isinstance(value, list):
        if not value:
            return "[]"
        return f"[{', '.join(str(v) for v in value)}]"
    elif value is None:
        return "~"
    else:
        return str(value)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config_manager = ConfigManager(get_execution_root(args))
    output_format = "json" if args.json else args.format

    if args.key:
        value = config_manager.get(args.key, _MISSING)
        if value is _MISSING:
            formatter.text(f"Key not found: {args.key}")
            return 1
        if output_format == "json":
            formatter.json_output({args.key: value})
        elif output_format == "yaml":
            formatter.text(dump_yaml_string(_nest_key(args.key, value)).rstrip())
        else:
            if isinstance(value, dict):
                formatter.text(f"{args.key}:")
                formatter.text(_format_value(value, indent=1))
            else:
                formatter.text(f"{args.key}: {_format_value(value)}")
        return 0

    config_data = config_manager.get_all()
    if output_format == "json":
        formatter.json_output(config_data)
    elif output_format == "yaml":
        formatter.text(dump_yaml_string(config_data).rstrip())
    else:
        for section in sorted(config_data):
            value = config_data[section]
            formatter.text(f"[{section}]")
            if isinstance(value, dict):
                formatter.text(_format_value(value, indent=1))
            else:
                formatter.text(f"  {_format_value(value)}")
            formatter.text("")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
