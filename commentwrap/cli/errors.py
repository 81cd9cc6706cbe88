"""
CLI error reporting.

Command handlers raise ``CLIError`` subclasses (or let domain errors escape);
``handle_cli_exception`` prints them to stderr with their code and hint and
exits. ``COMMENTWRAP_RERAISE`` / ``COMMENTWRAP_DEBUG`` re-raise instead, and
``COMMENTWRAP_VERBOSE`` adds context and the traceback.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional

_TRACE_LIMIT = 4000
_TRUTHY = {"1", "true", "yes", "on"}


class CLIError(Exception):
    """A failure reported to the user with a code and an optional hint."""

    default_code = "CLI_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.hint = hint
        self.context = dict(context or {})


class CLIConfigError(CLIError):
    """Invalid configuration file or option value."""

    default_code = "CLI_CONFIG_ERROR"


class CLIFileNotFoundError(CLIError):
    """A source file named on the command line does not exist."""

    default_code = "CLI_FILE_NOT_FOUND"


class CLIRuntimeError(CLIError):
    """A document could not be reflowed or written back."""

    default_code = "CLI_RUNTIME_ERROR"


def format_cli_error(exc: BaseException, *, verbose: bool = False, include_traceback: bool = False) -> str:
    """
    Render ``exc`` for stderr.

    Examples:
        >>> print(format_cli_error(CLIConfigError("Invalid width", hint="Use 1 or more")))
        Error [CLI_CONFIG_ERROR]: Invalid width
        Hint: Use 1 or more
    """
    if isinstance(exc, CLIError):
        lines = [f"Error [{exc.code}]: {exc.message}"]
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
        if verbose and exc.context:
            lines.append("\nContext:")
            lines.extend(f"  {key}: {value}" for key, value in exc.context.items())
    elif callable(getattr(exc, "format", None)):
        lines = [f"Error: {exc.format()}"]
    else:
        lines = [f"Error: {type(exc).__name__}: {exc}"]

    if include_traceback:
        trace = traceback.format_exc().strip()
        if len(trace) > _TRACE_LIMIT:
            trace = trace[:_TRACE_LIMIT - 3] + "..."
        lines.extend(["\nTraceback:", trace])
    return "\n".join(lines)


def wrap_exception(exc: BaseException, *, message: str, error_class: type = CLIRuntimeError, **kwargs) -> CLIError:
    """Turn a domain error into ``error_class``, keeping its hint and type."""
    context = kwargs.pop("context", None) or {}
    context.update(original_exception=str(exc), original_type=type(exc).__name__)
    kwargs.setdefault("hint", getattr(exc, "hint", None))
    return error_class(message, context=context, **kwargs)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def handle_cli_exception(exc: BaseException, *, verbose: bool = False, exit_code: int = 1) -> None:
    """Print ``exc`` and exit; never returns."""
    if _env_flag("COMMENTWRAP_RERAISE") or _env_flag("COMMENTWRAP_DEBUG"):
        raise exc
    verbose = verbose or _env_flag("COMMENTWRAP_VERBOSE")
    print(format_cli_error(exc, verbose=verbose, include_traceback=verbose), file=sys.stderr)
    sys.exit(exit_code)
