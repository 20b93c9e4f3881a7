"""
reactorview CLI package.

Commands are auto-discovered from domain subfolders (view/, reactor/,
config/); each command module exposes ``SUMMARY``, ``register_args`` and
``main``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._args import (
    add_dry_run_flag,
    add_format_arg,
    add_json_flag,
    add_reactor_source_args,
    add_root_flag,
    add_selection_args,
    add_standard_flags,
    add_verbose_flag,
    add_view_option_args,
)
from ._output import OutputFormatter
from ._utils import ViewInputs, get_execution_root, load_view_inputs

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_root_flag",
    "add_dry_run_flag",
    "add_verbose_flag",
    "add_selection_args",
    "add_view_option_args",
    "add_reactor_source_args",
    "add_format_arg",
    "add_standard_flags",
    # Utilities
    "ViewInputs",
    "get_execution_root",
    "load_view_inputs",
]
