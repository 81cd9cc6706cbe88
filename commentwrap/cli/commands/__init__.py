"""
Command modules for the commentwrap CLI.

Each module owns one subcommand and exposes ``cmd_<name>`` plus an
``add_<name>_command`` parser helper.
"""

from .reflow import add_reflow_command, cmd_reflow
from .tools import add_lsp_command, cmd_lsp

__all__ = [
    "cmd_reflow",
    "cmd_lsp",
    "add_reflow_command",
    "add_lsp_command",
]
