"""Text reflow for comment runs.

A run's comment bodies are stripped of their marker character, joined into a
single markdown paragraph and handed to a prose engine. The engine's output
is split back into lines, each prefixed with the single space that
conventionally follows ``//``.
"""

from __future__ import annotations

import re
import textwrap
from typing import Callable, Dict, List, Optional, Sequence

import mdformat

from ..errors import WrapEngineError
from ..nodes import Comment

ProseWrap = Callable[[str, int], str]

# Columns reserved for the reconstituted "//" marker and its leading space.
MARKER_RESERVE = 3

_MARKER_PATTERN = re.compile(r"^[^\w\s]")
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\n|\r")
_PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\s*\n")
# mdformat renders every thematic break as 70 underscores.
_THEMATIC_BREAK_PATTERN = re.compile(r"^_{70}$", re.MULTILINE)


def strip_marker(value: str) -> str:
    """Drop a leading marker character (``/`` of ``///``, ``!`` ...) and trim."""
    return _MARKER_PATTERN.sub("", value, count=1).strip()


def prepare_text(run: Sequence[Comment]) -> str:
    return "\n".join(strip_marker(comment.value) for comment in run)


def wrap_width(comment_width: int, column: int) -> int:
    return max(1, comment_width - column - MARKER_RESERVE)


def markdown_wrap(text: str, width: int) -> str:
    """Rewrap ``text`` as markdown, always wrapping paragraphs at ``width``.

    Ordered lists keep consecutive numbers, and thematic breaks are written
    as ``---`` rather than mdformat's fixed-length rule.
    """
    formatted = mdformat.text(text, options={"wrap": width, "number": True})
    return _THEMATIC_BREAK_PATTERN.sub("---", formatted)


def plain_wrap(text: str, width: int) -> str:
    """Rewrap blank-line separated paragraphs with :mod:`textwrap`."""
    paragraphs = [
        " ".join(paragraph.split())
        for paragraph in _PARAGRAPH_BREAK_PATTERN.split(text.strip())
    ]
    filled = [
        textwrap.fill(paragraph, width=width, break_long_words=False, break_on_hyphens=False)
        for paragraph in paragraphs
        if paragraph
    ]
    if not filled:
        return ""
    return "\n\n".join(filled) + "\n"


PROSE_ENGINES: Dict[str, ProseWrap] = {
    "markdown": markdown_wrap,
    "plain": plain_wrap,
}


def get_prose_engine(name: str) -> ProseWrap:
    try:
        return PROSE_ENGINES[name]
    except KeyError:
        raise WrapEngineError(
            f"Unknown prose engine '{name}'",
            hint=f"Available engines: {', '.join(sorted(PROSE_ENGINES))}",
        ) from None


def reflow_text(
    run: Sequence[Comment],
    comment_width: int,
    wrap: ProseWrap,
) -> Optional[List[str]]:
    """Wrap the text of ``run``.

    Returns the new comment values, or None when the engine recommends no
    change (empty result), in which case the run must be kept as it is.

    Raises:
        WrapEngineError: if the engine itself fails.
    """
    first = run[0]
    width = wrap_width(comment_width, first.loc.start.column)
    prepared = prepare_text(run)
    try:
        formatted = wrap(prepared, width)
    except Exception as exc:
        raise WrapEngineError(
            f"Prose engine failed while wrapping comments: {exc}",
            line=first.loc.start.line,
            column=first.loc.start.column,
        ) from exc

    if not formatted:
        return None
    # Engines terminate the document with a line break; it is not a comment line.
    formatted = formatted.rstrip("\r\n")
    if not formatted:
        return None
    # Blank separator lines stay bare so no trailing whitespace is printed.
    return [f" {line}" if line else "" for line in _LINE_BREAK_PATTERN.split(formatted)]


__all__ = [
    "ProseWrap",
    "MARKER_RESERVE",
    "PROSE_ENGINES",
    "strip_marker",
    "prepare_text",
    "wrap_width",
    "markdown_wrap",
    "plain_wrap",
    "get_prose_engine",
    "reflow_text",
]
