"""Single-pass comment reflow engine.

The engine walks the ordered comment nodes of a document once. Adjacent line
comments are grouped into runs; each completed run is rewrapped, rebuilt
into fresh nodes and its effect on positions is recorded as drift, which is
applied to every node that follows. State is threaded through the traversal
as an immutable :class:`ReflowState` value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from ..config import ReflowOptions
from ..nodes import Comment, SourceLocation, validate_comment
from .accumulator import Run, extends_run, run_column
from .drift import Drift
from .rebuild import rebuild_run
from .wrapper import ProseWrap, get_prose_engine, reflow_text

logger = logging.getLogger(__name__)

BlankLineProbe = Callable[[Comment], bool]
TrailingProbe = Callable[[Comment], bool]


def _never_blank(comment: Comment) -> bool:
    return False


def _never_trailing(comment: Comment) -> bool:
    return False


@dataclass(frozen=True)
class RunEdit:
    """A reflowed run: the original span it covered and its replacement nodes."""

    start: int
    end: int
    loc: SourceLocation
    column: int
    comments: Tuple[Comment, ...]
    newline: str = "\n"


@dataclass(frozen=True)
class ReflowContext:
    """Collaborators and options shared by every traversal step."""

    options: ReflowOptions
    wrap: ProseWrap
    is_followed_by_blank_line: BlankLineProbe = _never_blank
    is_trailing: TrailingProbe = _never_trailing
    newline: str = "\n"


@dataclass(frozen=True)
class ReflowState:
    """Traversal state: the open run, accumulated drift and output so far."""

    run: Run = ()
    drift: Drift = Drift()
    output: Tuple[Comment, ...] = ()
    edits: Tuple[RunEdit, ...] = ()


@dataclass(frozen=True)
class ReflowResult:
    comments: Tuple[Comment, ...]
    drift: Drift
    edits: Tuple[RunEdit, ...]

    @property
    def changed(self) -> bool:
        return bool(self.edits)


def flush_run(state: ReflowState, context: ReflowContext) -> ReflowState:
    """Reflow the open run (if any) and append its replacement to the output."""
    run = state.run
    if not run:
        return state

    drift = state.drift
    column = run_column(run)
    lines = reflow_text(run, context.options.comment_width, context.wrap)

    if lines is None:
        logger.debug(
            "Prose engine returned nothing for run at line %d; keeping %d comment(s)",
            run[0].loc.start.line,
            len(run),
        )
        kept = tuple(drift.apply(comment) for comment in run)
        return replace(state, run=(), output=state.output + kept)

    rebuilt = rebuild_run(
        lines,
        start=drift.offset(run[0].start),
        line=drift.line(run[0].loc.start.line),
        column=column,
        trailing_blank=context.is_followed_by_blank_line(run[-1]),
        newline=context.newline,
    )
    new_drift = drift.record(
        old_count=len(run),
        new_count=len(rebuilt),
        old_end=drift.offset(run[-1].end),
        new_end=rebuilt[-1].end,
    )
    logger.debug(
        "Reflowed run at line %d: %d -> %d line(s), drift now %+d line(s) %+d char(s)",
        run[0].loc.start.line,
        len(run),
        len(rebuilt),
        new_drift.lines,
        new_drift.characters,
    )
    edit = RunEdit(
        start=run[0].start,
        end=run[-1].end,
        loc=SourceLocation(start=run[0].loc.start, end=run[-1].loc.end),
        column=column,
        comments=rebuilt,
        newline=context.newline,
    )
    return ReflowState(
        run=(),
        drift=new_drift,
        output=state.output + rebuilt,
        edits=state.edits + (edit,),
    )


def _joins(run: Run, comment: Comment, context: ReflowContext) -> bool:
    # A comment sharing its line with code keeps a run of its own.
    if context.is_trailing(run[0]) or context.is_trailing(comment):
        return False
    return extends_run(run, comment)


def step(state: ReflowState, comment: Comment, context: ReflowContext) -> ReflowState:
    """Process one comment in traversal order."""
    if comment.is_line:
        if state.run and _joins(state.run, comment, context):
            return replace(state, run=state.run + (comment,))
        flushed = flush_run(state, context)
        return replace(flushed, run=(comment,))

    flushed = flush_run(state, context)
    # Block comments pass through unchanged apart from drift.
    return replace(flushed, output=flushed.output + (flushed.drift.apply(comment),))


def filter_empty(comments: Iterable[Comment]) -> Tuple[Comment, ...]:
    """Drop comments whose body is empty once whitespace is trimmed."""
    return tuple(comment for comment in comments if comment.value.strip())


def reflow_comments(
    comments: Sequence[Any],
    options: Optional[ReflowOptions] = None,
    *,
    wrap: Optional[ProseWrap] = None,
    is_followed_by_blank_line: Optional[BlankLineProbe] = None,
    is_trailing: Optional[TrailingProbe] = None,
    newline: str = "\n",
) -> ReflowResult:
    """Reflow every run of adjacent line comments in ``comments``.

    Args:
        comments: Comment nodes in source order; babel-style dictionaries are
            accepted and converted.
        options: Reflow options; defaults to an 80 column markdown reflow.
        wrap: Prose engine override; defaults to ``options.prose_wrap``.
        is_followed_by_blank_line: Tells whether the source line after a
            comment is blank; defaults to never.
        is_trailing: Tells whether code precedes a comment on its line; such
            comments are never merged with their neighbours. Defaults to never.
        newline: Line break written between rebuilt lines; offsets of
            rebuilt nodes account for its length.

    Returns:
        ReflowResult with the filtered replacement nodes, the final drift and
        one edit per reflowed run.

    Raises:
        MalformedCommentError: before any processing if a node is incomplete.
        WrapEngineError: if the prose engine fails; no partial output is kept.
    """
    options = (options or ReflowOptions()).validate()
    nodes = tuple(validate_comment(comment) for comment in comments)
    context = ReflowContext(
        options=options,
        wrap=wrap or get_prose_engine(options.prose_wrap),
        is_followed_by_blank_line=is_followed_by_blank_line or _never_blank,
        is_trailing=is_trailing or _never_trailing,
        newline=newline,
    )

    state = ReflowState()
    for comment in nodes:
        state = step(state, comment, context)
    state = flush_run(state, context)

    logger.debug(
        "Reflow finished: %d comment(s) in, %d run(s) rewritten",
        len(nodes),
        len(state.edits),
    )
    return ReflowResult(
        comments=filter_empty(state.output),
        drift=state.drift,
        edits=state.edits,
    )


__all__ = [
    "RunEdit",
    "ReflowContext",
    "ReflowState",
    "ReflowResult",
    "flush_run",
    "step",
    "filter_empty",
    "reflow_comments",
]
