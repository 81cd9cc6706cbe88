"""Splice reflowed comment runs back into source text."""

from __future__ import annotations

from typing import Iterable

from .reflow.engine import RunEdit
from .reflow.rebuild import LINE_OPENER
from .source import line_start_offset


def run_indent(source_text: str, edit: RunEdit) -> str:
    """Whitespace that precedes the run's first comment on its line.

    When code precedes the comment, the same number of spaces is used.
    """
    prefix = source_text[line_start_offset(source_text, edit.start):edit.start]
    if prefix.strip():
        return " " * edit.column
    return prefix


def render_run(source_text: str, edit: RunEdit) -> str:
    """Render the replacement for ``edit``.

    Lines are joined with the edit's line break. The trailing newline marker
    on the last comment is dropped: the blank line it stands for is still
    present in the untouched source after the run.
    """
    separator = edit.newline + run_indent(source_text, edit)
    lines = []
    for comment in edit.comments:
        body = comment.value.rstrip("\n")
        lines.append(f"{LINE_OPENER}{body}")
    return separator.join(lines)


def apply_edits(source_text: str, edits: Iterable[RunEdit]) -> str:
    """Apply run edits to ``source_text``; spans refer to the original text."""
    text = source_text
    for edit in sorted(edits, key=lambda item: item.start, reverse=True):
        text = text[:edit.start] + render_run(source_text, edit) + text[edit.end:]
    return text


__all__ = ["run_indent", "render_run", "apply_edits"]
