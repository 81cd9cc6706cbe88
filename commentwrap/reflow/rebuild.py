"""Regeneration of line comment nodes from wrapped text."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..nodes import Comment, CommentKind, Position, SourceLocation

LINE_OPENER = "//"


def rebuild_run(
    lines: Sequence[str],
    *,
    start: int,
    line: int,
    column: int,
    trailing_blank: bool,
    newline: str = "\n",
) -> Tuple[Comment, ...]:
    """Turn wrapped comment values into positioned line comments.

    Each node is laid out on its own line at ``column``. Offsets assume the
    printer re-emits ``column`` characters of indentation after every line
    break, so at column 0 consecutive nodes are ``len(text) + len(newline)``
    apart.

    When ``trailing_blank`` is set the last value ends with a newline so the
    blank line that separated the run from what follows is kept. Spans are
    measured before that newline is added.
    """
    rebuilt: List[Comment] = []
    offset = start
    current_line = line
    last_index = len(lines) - 1

    for index, value in enumerate(lines):
        width = len(LINE_OPENER) + len(value)
        if index == last_index and trailing_blank:
            value = f"{value}\n"
        rebuilt.append(
            Comment(
                kind=CommentKind.LINE,
                value=value,
                start=offset,
                end=offset + width,
                loc=SourceLocation(
                    start=Position(current_line, column),
                    end=Position(current_line, column + width),
                ),
            )
        )
        offset += width + len(newline) + column
        current_line += 1

    return tuple(rebuilt)


__all__ = ["LINE_OPENER", "rebuild_run"]
