"""Utilities for capturing comments from C-family source text."""

from __future__ import annotations

from typing import Callable, List, Optional

from .errors import CommentSyntaxError
from .nodes import Comment, CommentKind, Position, SourceLocation

QUOTE_CHARS = "'\"`"
HORIZONTAL_SPACE = " \t"


class _Cursor:
    """Tracks the current line while walking the source text."""

    def __init__(self) -> None:
        self.line = 1
        self.line_start = 0

    def newline(self, index: int) -> None:
        self.line += 1
        self.line_start = index + 1

    def column(self, index: int) -> int:
        return index - self.line_start


def scan_comments(source_text: str, *, path: Optional[str] = None) -> List[Comment]:
    """Extract ``//`` and ``/* */`` comments in source order.

    String literals (single, double and back-quoted) and backslash escapes
    are skipped so that comment openers inside them are not reported.

    Raises:
        CommentSyntaxError: if a block comment is never closed.
    """
    comments: List[Comment] = []
    cursor = _Cursor()
    length = len(source_text)
    quote: Optional[str] = None
    index = 0

    while index < length:
        char = source_text[index]

        if char == "\\":
            if index + 1 < length and source_text[index + 1] == "\n":
                cursor.newline(index + 1)
            index += 2
            continue

        if char == "\n":
            cursor.newline(index)
            # Ordinary strings cannot span lines; template literals can.
            if quote is not None and quote != "`":
                quote = None
            index += 1
            continue

        if quote is not None:
            if char == quote:
                quote = None
            index += 1
            continue

        if char in QUOTE_CHARS:
            quote = char
            index += 1
            continue

        if source_text.startswith("//", index):
            end = source_text.find("\n", index)
            if end == -1:
                end = length
            if end > index and source_text[end - 1] == "\r":
                end -= 1
            column = cursor.column(index)
            comments.append(
                Comment(
                    kind=CommentKind.LINE,
                    value=source_text[index + 2:end],
                    start=index,
                    end=end,
                    loc=SourceLocation(
                        start=Position(cursor.line, column),
                        end=Position(cursor.line, column + (end - index)),
                    ),
                )
            )
            index = end
            continue

        if source_text.startswith("/*", index):
            column = cursor.column(index)
            close = source_text.find("*/", index + 2)
            if close == -1:
                raise CommentSyntaxError(
                    "Unterminated block comment",
                    path=path,
                    line=cursor.line,
                    column=column,
                    hint="Close the comment with '*/'",
                )
            end = close + 2
            start_line = cursor.line
            for offset in range(index, end):
                if source_text[offset] == "\n":
                    cursor.newline(offset)
            comments.append(
                Comment(
                    kind=CommentKind.BLOCK,
                    value=source_text[index + 2:close],
                    start=index,
                    end=end,
                    loc=SourceLocation(
                        start=Position(start_line, column),
                        end=Position(cursor.line, cursor.column(end)),
                    ),
                )
            )
            index = end
            continue

        index += 1

    return comments


def is_next_line_empty(source_text: str, index: int) -> bool:
    """Return True when the line after the one ending at ``index`` is blank."""
    length = len(source_text)
    position = index
    while position < length and source_text[position] in HORIZONTAL_SPACE:
        position += 1
    if source_text.startswith("\r\n", position):
        position += 2
    elif position < length and source_text[position] in "\r\n":
        position += 1
    else:
        return False
    while position < length and source_text[position] in HORIZONTAL_SPACE:
        position += 1
    return position < length and source_text[position] in "\r\n"


def blank_line_probe(source_text: str) -> Callable[[Comment], bool]:
    """Build the ``is_followed_by_blank_line`` capability for ``source_text``."""

    def is_followed_by_blank_line(comment: Comment) -> bool:
        return is_next_line_empty(source_text, comment.end)

    return is_followed_by_blank_line


def line_start_offset(source_text: str, index: int) -> int:
    """Offset of the first character on the line containing ``index``."""
    return source_text.rfind("\n", 0, index) + 1


def line_terminator(source_text: str) -> str:
    """The line break used by ``source_text``: ``"\\r\\n"`` or ``"\\n"``.

    Decided by the first line break in the text.
    """
    index = source_text.find("\n")
    if index > 0 and source_text[index - 1] == "\r":
        return "\r\n"
    return "\n"


def trailing_comment_probe(source_text: str) -> Callable[[Comment], bool]:
    """Build the ``is_trailing`` capability: True when code precedes the comment."""

    def is_trailing(comment: Comment) -> bool:
        prefix = source_text[line_start_offset(source_text, comment.start):comment.start]
        return bool(prefix.strip())

    return is_trailing


__all__ = [
    "scan_comments",
    "is_next_line_empty",
    "blank_line_probe",
    "line_start_offset",
    "line_terminator",
    "trailing_comment_probe",
]
