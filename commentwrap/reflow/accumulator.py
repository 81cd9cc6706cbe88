"""Grouping of adjacent line comments into runs."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from ..nodes import Comment

Run = Tuple[Comment, ...]


class RunState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


def run_state(run: Run) -> RunState:
    return RunState.ACCUMULATING if run else RunState.IDLE


def next_consecutive_line(run: Run) -> int:
    """Line a comment must start on to continue ``run``."""
    return run[-1].loc.end.line + 1


def extends_run(run: Run, comment: Comment) -> bool:
    """Return True if ``comment`` continues ``run``.

    Any line comment starts an empty run. Block comments never join one.
    """
    if not comment.is_line:
        return False
    if not run:
        return True
    return comment.loc.start.line == next_consecutive_line(run)


def run_column(run: Run) -> int:
    """Indentation column shared by every member, taken from the first."""
    return run[0].loc.start.column


__all__ = ["Run", "RunState", "run_state", "next_consecutive_line", "extends_run", "run_column"]
