"""
Development tools commands.

This module starts the language server used by editors to reflow comments
on document formatting.
"""

import argparse

from ..errors import CLIRuntimeError, handle_cli_exception


def cmd_lsp(args: argparse.Namespace) -> None:
    """
    Handle the 'lsp' subcommand: serve document formatting over stdio.

    Raises:
        SystemExit: If the server cannot be started
    """
    try:
        from commentwrap.lsp.server import main as lsp_main
    except ImportError as exc:
        handle_cli_exception(
            CLIRuntimeError(
                f"Language server dependencies are missing: {exc}",
                hint="Reinstall commentwrap so that pygls is available",
            ),
            verbose=getattr(args, "verbose", False),
        )
        return
    lsp_main()


def add_lsp_command(subparsers) -> None:
    lsp_parser = subparsers.add_parser('lsp', help='Start the language server over stdio')
    lsp_parser.set_defaults(func=cmd_lsp)
