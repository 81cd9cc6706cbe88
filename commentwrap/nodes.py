"""Comment nodes and source locations consumed by the reflow engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional

from .errors import MalformedCommentError


class CommentKind(Enum):
    """Comment syntaxes understood by the engine."""

    LINE = "CommentLine"
    BLOCK = "CommentBlock"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    """A point in source text. Lines are 1-based, columns 0-based."""

    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    start: Position
    end: Position

    def __str__(self) -> str:
        if self.end.line != self.start.line:
            return f"{self.start.line}-{self.end.line}"
        return f"{self.start.line}:{self.start.column}"


@dataclass(frozen=True)
class Comment:
    """A single comment attached to a parsed source tree.

    ``value`` holds the body after the opener, so ``/// doc`` has the value
    ``"/ doc"``. ``start`` and ``end`` are character offsets of the raw
    ``text`` in the source it came from.
    """

    kind: CommentKind
    value: str
    start: int
    end: int
    loc: SourceLocation

    @property
    def text(self) -> str:
        if self.kind is CommentKind.BLOCK:
            return f"/*{self.value}*/"
        return f"//{self.value}"

    @property
    def is_line(self) -> bool:
        return self.kind is CommentKind.LINE

    @property
    def column(self) -> int:
        return self.loc.start.column

    def shifted(self, *, lines: int = 0, characters: int = 0) -> "Comment":
        """Return a copy moved by ``lines`` and ``characters``."""
        if not lines and not characters:
            return self
        return replace(
            self,
            start=self.start + characters,
            end=self.end + characters,
            loc=SourceLocation(
                start=Position(self.loc.start.line + lines, self.loc.start.column),
                end=Position(self.loc.end.line + lines, self.loc.end.column),
            ),
        )

    def to_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "value": self.value,
            "start": self.start,
            "end": self.end,
            "loc": {
                "start": {"line": self.loc.start.line, "column": self.loc.start.column},
                "end": {"line": self.loc.end.line, "column": self.loc.end.column},
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Comment":
        """Load a babel-shaped comment dictionary.

        Raises:
            MalformedCommentError: when the kind, value, span or location
                fields are missing or of the wrong type.
        """
        kind = _parse_kind(data.get("type"))
        value = data.get("value")
        if not isinstance(value, str):
            raise MalformedCommentError("Comment node has no string 'value'")
        loc = data.get("loc")
        if not isinstance(loc, Mapping):
            raise MalformedCommentError("Comment node has no 'loc' mapping")
        start_line = _require_int(loc.get("start"), "line", "loc.start.line")
        return cls(
            kind=kind,
            value=value,
            start=_require_int(data, "start", "start", line=start_line),
            end=_require_int(data, "end", "end", line=start_line),
            loc=SourceLocation(
                start=Position(
                    start_line,
                    _require_int(loc.get("start"), "column", "loc.start.column"),
                ),
                end=Position(
                    _require_int(loc.get("end"), "line", "loc.end.line"),
                    _require_int(loc.get("end"), "column", "loc.end.column"),
                ),
            ),
        )


def _parse_kind(raw: Any) -> CommentKind:
    if isinstance(raw, CommentKind):
        return raw
    aliases = {
        "CommentLine": CommentKind.LINE,
        "Line": CommentKind.LINE,
        "line": CommentKind.LINE,
        "CommentBlock": CommentKind.BLOCK,
        "Block": CommentKind.BLOCK,
        "block": CommentKind.BLOCK,
    }
    kind = aliases.get(raw) if isinstance(raw, str) else None
    if kind is None:
        raise MalformedCommentError(
            f"Unknown comment type {raw!r}",
            hint="Use 'CommentLine' or 'CommentBlock'",
        )
    return kind


def _require_int(
    container: Optional[Mapping[str, Any]],
    key: str,
    label: str,
    *,
    line: Optional[int] = None,
) -> int:
    if not isinstance(container, Mapping):
        raise MalformedCommentError(f"Comment node is missing '{label}'", line=line)
    value = container.get(key)
    # bool is an int subclass but never a valid offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedCommentError(f"Comment node is missing '{label}'", line=line)
    return value


def validate_comment(comment: Any) -> Comment:
    """Check that ``comment`` carries every span and location field."""
    if isinstance(comment, Mapping):
        return Comment.from_dict(comment)
    if not isinstance(comment, Comment):
        raise MalformedCommentError(f"Expected a comment node, got {type(comment).__name__}")
    if not isinstance(comment.kind, CommentKind):
        raise MalformedCommentError(f"Unknown comment kind {comment.kind!r}")
    if not isinstance(comment.value, str):
        raise MalformedCommentError("Comment node has no string 'value'")
    loc = comment.loc
    if not isinstance(loc, SourceLocation) or not isinstance(loc.start, Position) or not isinstance(loc.end, Position):
        raise MalformedCommentError("Comment node has no source location")
    fields = {
        "start": comment.start,
        "end": comment.end,
        "loc.start.line": loc.start.line,
        "loc.start.column": loc.start.column,
        "loc.end.line": loc.end.line,
        "loc.end.column": loc.end.column,
    }
    for label, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedCommentError(f"Comment node is missing '{label}'")
    return comment


__all__ = [
    "CommentKind",
    "Position",
    "SourceLocation",
    "Comment",
    "validate_comment",
]
