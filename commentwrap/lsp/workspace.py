"""Formatting state shared by the language server handlers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional
from urllib.parse import unquote, urlparse

from lsprotocol.types import Position, Range, TextEdit

from commentwrap.config import ReflowOptions, load_reflow_options
from commentwrap.errors import ReflowError
from commentwrap.formatting import CommentFormatter
from commentwrap.printer import render_run

logger = logging.getLogger(__name__)


def _uri_to_path(uri: Optional[str]) -> Optional[Path]:
    if not uri:
        return None
    parsed = urlparse(uri)
    if parsed.scheme and parsed.scheme != "file":
        return None
    return Path(unquote(parsed.path))


class ReflowWorkspace:
    """Holds the reflow options of the open workspace."""

    def __init__(self, options: Optional[ReflowOptions] = None) -> None:
        self.root_path: Optional[Path] = None
        self.formatter = CommentFormatter(options)

    @property
    def options(self) -> ReflowOptions:
        return self.formatter.options

    def set_root(self, root_uri: Optional[str]) -> None:
        root = _uri_to_path(root_uri)
        if root is None:
            return
        self.root_path = root
        try:
            self.formatter = CommentFormatter(load_reflow_options(root))
        except ReflowError as exc:
            logger.warning("Ignoring invalid configuration in %s: %s", root, exc.format())

    def format_text(self, source_text: str, uri: str = "untitled") -> List[TextEdit]:
        """One edit per reflowed run whose rendering differs from the source."""
        try:
            result = self.formatter.reflow(source_text, uri)
        except ReflowError as exc:
            logger.warning("Cannot format %s: %s", uri, exc.format())
            return []

        edits: List[TextEdit] = []
        for edit in result.edits:
            new_text = render_run(source_text, edit)
            if new_text == source_text[edit.start:edit.end]:
                continue
            edits.append(
                TextEdit(
                    range=Range(
                        start=Position(line=edit.loc.start.line - 1, character=edit.loc.start.column),
                        end=Position(line=edit.loc.end.line - 1, character=edit.loc.end.column),
                    ),
                    new_text=new_text,
                )
            )
        return edits


__all__ = ["ReflowWorkspace"]
