"""Errors raised while scanning, configuring or reflowing comments.

Every error carries an optional source location, a machine-readable code and
a hint. ``format()`` renders them on one line for the CLI and the formatter:

    Unterminated block comment (app.js:4:2; COMMENT_SYNTAX) Hint: Close the comment with '*/'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> Optional[str]:
        """``path:line:column`` with the known parts, or None."""
        if self.line is None:
            return self.path
        if self.path is None:
            if self.column is None:
                return f"line {self.line}"
            return f"line {self.line}, column {self.column}"
        parts = [self.path, str(self.line)]
        if self.column is not None:
            parts.append(str(self.column))
        return ":".join(parts)


class ReflowError(Exception):
    """Base class of every commentwrap failure."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path, line, column)
        self.code = code or self.code
        self.hint = hint or self.hint

    @property
    def path(self) -> Optional[str]:
        return self.location.path

    @property
    def line(self) -> Optional[int]:
        return self.location.line

    @property
    def column(self) -> Optional[int]:
        return self.location.column

    def format(self) -> str:
        details = [part for part in (self.location.describe(), self.code) if part]
        text = self.message
        if details:
            text += f" ({'; '.join(details)})"
        if self.hint:
            text += f" Hint: {self.hint}"
        return text


class WrapEngineError(ReflowError):
    """The prose engine failed; the whole operation is abandoned."""

    code = "WRAP_ENGINE_FAILURE"


class MalformedCommentError(ReflowError):
    """A comment node lacks span or location fields."""

    code = "MALFORMED_NODE"


class CommentSyntaxError(ReflowError):
    """The scanner met a block comment that is never closed."""

    code = "COMMENT_SYNTAX"


class ConfigError(ReflowError):
    """Invalid reflow option or configuration file."""

    code = "CONFIG_ERROR"


__all__ = [
    "ErrorLocation",
    "ReflowError",
    "WrapEngineError",
    "MalformedCommentError",
    "CommentSyntaxError",
    "ConfigError",
]
