"""
Output formatting for CLI operations.

Status lines are written to stderr so that reflowed source printed to stdout
can be piped.
"""

import sys
from typing import Iterable


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Reflowed app.ts")  # doctest: +SKIP
        ✓ Reflowed app.ts
    """
    print(f"✓ {message}", file=sys.stderr)


def print_error(message: str) -> None:
    """Print error message with cross prefix."""
    print(f"✗ {message}", file=sys.stderr)


def print_check_summary(changed: Iterable[str], total: int) -> None:
    """
    Summarise a --check run.

    Examples:
        >>> print_check_summary(["a.ts"], 3)  # doctest: +SKIP
        ✗ a.ts would be reflowed
        1 of 3 file(s) would be reflowed
    """
    changed = list(changed)
    for path in changed:
        print_error(f"{path} would be reflowed")
    if changed:
        print(f"{len(changed)} of {total} file(s) would be reflowed", file=sys.stderr)
    else:
        print_success(f"{total} file(s) already reflowed")
