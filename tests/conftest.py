"""Shared pytest fixtures and configuration for all tests."""

import pytest

from commentwrap.nodes import Comment, CommentKind, Position, SourceLocation


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "markdown: test depends on the mdformat prose engine")


def line_comment(value: str, line: int, start: int, column: int = 0) -> Comment:
    """Build a ``//`` comment node whose span matches its raw text."""
    width = 2 + len(value)
    return Comment(
        kind=CommentKind.LINE,
        value=value,
        start=start,
        end=start + width,
        loc=SourceLocation(
            start=Position(line, column),
            end=Position(line, column + width),
        ),
    )


def block_comment(value: str, line: int, start: int, column: int = 0) -> Comment:
    """Build a single-line ``/* */`` comment node."""
    width = 4 + len(value)
    return Comment(
        kind=CommentKind.BLOCK,
        value=value,
        start=start,
        end=start + width,
        loc=SourceLocation(
            start=Position(line, column),
            end=Position(line, column + width),
        ),
    )


@pytest.fixture
def era_comments():
    """The two-line comment run from the reflow walkthrough."""
    return [
        line_comment(" The start of an era.", line=1, start=0),
        line_comment(" The end of an era.", line=2, start=24),
    ]


@pytest.fixture
def no_env_flags(monkeypatch):
    """Make sure CLI error handling exits instead of re-raising."""
    for name in ("COMMENTWRAP_RERAISE", "COMMENTWRAP_DEBUG", "COMMENTWRAP_VERBOSE", "COMMENTWRAP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
