"""
Reflow command.

Rewraps runs of adjacent ``//`` comments in one or more source files. The
result is printed, written back in place (``--write``) or only checked
(``--check``).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from commentwrap.config import apply_cli_overrides, load_reflow_options
from commentwrap.errors import ConfigError
from commentwrap.formatting import CommentFormatter

from ..errors import (
    CLIConfigError,
    CLIFileNotFoundError,
    CLIRuntimeError,
    handle_cli_exception,
    wrap_exception,
)
from ..output import print_check_summary, print_success

logger = logging.getLogger(__name__)


def _resolve_formatter(args: argparse.Namespace) -> CommentFormatter:
    workspace = Path(getattr(args, "workspace", None) or Path.cwd())
    config = getattr(args, "config", None)
    try:
        options = load_reflow_options(workspace, Path(config) if config else None)
        options = apply_cli_overrides(
            options,
            comment_width=getattr(args, "comment_width", None),
            prose_wrap=getattr(args, "prose_wrap", None),
        )
    except ConfigError as exc:
        raise wrap_exception(exc, message=exc.message, error_class=CLIConfigError) from exc
    logger.debug("Reflow options: %s", options)
    return CommentFormatter(options)


def _read_sources(paths: List[str]) -> List[Path]:
    resolved = []
    for raw in paths:
        path = Path(raw)
        if not path.is_file():
            raise CLIFileNotFoundError(
                f"Source file not found: {raw}",
                hint="Pass paths to existing source files",
                context={"path": raw},
            )
        resolved.append(path)
    return resolved


def cmd_reflow(args: argparse.Namespace) -> None:
    """
    Handle the 'reflow' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - files: Source files to reflow
            - write: Rewrite files in place
            - check: Exit with status 1 if any file would change
            - comment_width / prose_wrap: Option overrides

    Raises:
        SystemExit: On errors, or when --check finds files to reflow

    Examples:
        >>> args = argparse.Namespace(files=["app.ts"], write=True, check=False)
        >>> cmd_reflow(args)  # doctest: +SKIP
        ✓ Reflowed app.ts
    """
    verbose = getattr(args, "verbose", False)
    try:
        formatter = _resolve_formatter(args)
        sources = _read_sources(args.files)
        if len(sources) > 1 and not (args.write or args.check):
            raise CLIConfigError(
                "Printing to stdout supports a single file",
                hint="Use --write or --check with several files",
            )

        changed: List[str] = []
        for path in sources:
            source_text = path.read_text(encoding="utf-8")
            result = formatter.format_document(source_text, str(path))
            if not result.success():
                raise CLIRuntimeError(
                    f"Could not reflow {path}: {result.errors[0]}",
                    context={"path": str(path)},
                )
            if result.is_changed:
                changed.append(str(path))

            if args.write:
                if result.is_changed:
                    path.write_text(result.formatted_text, encoding="utf-8")
                    print_success(f"Reflowed {path}")
            elif not args.check:
                sys.stdout.write(result.formatted_text)

        if args.check:
            print_check_summary(changed, len(sources))
            if changed:
                sys.exit(1)
    except SystemExit:
        raise
    except Exception as exc:
        handle_cli_exception(exc, verbose=verbose)


def add_reflow_command(subparsers) -> None:
    reflow_parser = subparsers.add_parser(
        'reflow',
        help='Rewrap runs of adjacent // comments'
    )
    reflow_parser.add_argument('files', nargs='+', help='Source files to reflow')
    mode = reflow_parser.add_mutually_exclusive_group()
    mode.add_argument('--write', '-w', action='store_true', help='Rewrite files in place')
    mode.add_argument(
        '--check', action='store_true',
        help='Exit with status 1 if any file would be reflowed'
    )
    reflow_parser.add_argument(
        '--comment-width', type=int, default=None,
        help='Column at which comments wrap (default: 80 or the configured value)'
    )
    reflow_parser.add_argument(
        '--prose-wrap', choices=['markdown', 'plain'], default=None,
        help='Prose engine used to rewrap comment text'
    )
    reflow_parser.set_defaults(func=cmd_reflow)
