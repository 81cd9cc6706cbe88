"""Reflow engine for runs of adjacent line comments."""

from __future__ import annotations

from .accumulator import RunState, extends_run, run_state
from .drift import Drift
from .engine import ReflowContext, ReflowResult, ReflowState, RunEdit, filter_empty, reflow_comments
from .rebuild import rebuild_run
from .wrapper import PROSE_ENGINES, ProseWrap, get_prose_engine, markdown_wrap, plain_wrap, reflow_text

__all__ = [
    "RunState",
    "extends_run",
    "run_state",
    "Drift",
    "ReflowContext",
    "ReflowResult",
    "ReflowState",
    "RunEdit",
    "filter_empty",
    "reflow_comments",
    "rebuild_run",
    "PROSE_ENGINES",
    "ProseWrap",
    "get_prose_engine",
    "markdown_wrap",
    "plain_wrap",
    "reflow_text",
]
