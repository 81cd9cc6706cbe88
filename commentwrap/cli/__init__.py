"""
commentwrap CLI entry point.

This module provides the main CLI interface, dispatching subcommands to
focused command modules.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from commentwrap import __version__

from .commands import add_lsp_command, add_reflow_command, cmd_lsp, cmd_reflow
from .errors import CLIError, format_cli_error, handle_cli_exception


def _configure_logging(args) -> None:
    """Configure the commentwrap logger from --log-level or COMMENTWRAP_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('COMMENTWRAP_LOG_LEVEL', 'warn')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    numeric_level = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('commentwrap')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="commentwrap – rewrap runs of // comments at a fixed comment width",
        prog="commentwrap"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a commentwrap.toml, .commentwraprc or pyproject.toml file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set COMMENTWRAP_VERBOSE=1)'
    )
    parser.add_argument(
        '--workspace',
        default=str(Path.cwd()),
        help='Directory searched for configuration (defaults to current working directory)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set COMMENTWRAP_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    add_reflow_command(subparsers)
    add_lsp_command(subparsers)
    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        Print a reflowed file:
        >>> main(['reflow', 'app.ts'])  # doctest: +SKIP

        Rewrite files in place at 72 columns:
        >>> main(['reflow', '--write', '--comment-width', '72', 'a.ts', 'b.ts'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if not getattr(args, 'func', None):
        parser.print_help()
        sys.exit(2)

    args.func(args)


__all__ = [
    "main",
    "build_parser",
    "cmd_reflow",
    "cmd_lsp",
    "CLIError",
    "format_cli_error",
    "handle_cli_exception",
    "_configure_logging",
]
