"""Document-level comment formatting built on the reflow engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from commentwrap.config import ReflowOptions
from commentwrap.errors import CommentSyntaxError, ReflowError
from commentwrap.nodes import Comment
from commentwrap.printer import apply_edits
from commentwrap.reflow import ProseWrap, ReflowResult, reflow_comments
from commentwrap.source import blank_line_probe, line_terminator, scan_comments, trailing_comment_probe

logger = logging.getLogger(__name__)


@dataclass
class FormattedResult:
    """Result of a comment formatting operation."""

    formatted_text: str
    is_changed: bool
    errors: List[str]
    warnings: List[str]
    comments: List[Comment] = field(default_factory=list)

    def success(self) -> bool:
        """Check if formatting was successful."""
        return len(self.errors) == 0


class CommentFormatter:
    """
    Comment reflow formatter for C-family source files.

    This formatter:
    1. Scans the source text for comment nodes
    2. Reflows runs of adjacent line comments at the comment width
    3. Splices the rewrapped runs back into the original text
    4. Leaves code, block comments and untouched runs byte-identical
    """

    def __init__(self, options: Optional[ReflowOptions] = None, wrap: Optional[ProseWrap] = None):
        self.options = (options or ReflowOptions()).validate()
        self.wrap = wrap

    def reflow(self, source_text: str, file_path: str = "untitled") -> ReflowResult:
        """Run the reflow engine over ``source_text`` without printing.

        Raises:
            ReflowError: on scan failures, malformed nodes or engine failures.
        """
        comments = scan_comments(source_text, path=file_path)
        logger.debug("Scanned %d comment(s) in %s", len(comments), file_path)
        return reflow_comments(
            comments,
            self.options,
            wrap=self.wrap,
            is_followed_by_blank_line=blank_line_probe(source_text),
            is_trailing=trailing_comment_probe(source_text),
            newline=line_terminator(source_text),
        )

    def format_document(self, source_text: str, file_path: str = "untitled") -> FormattedResult:
        """
        Reflow the comments of a complete document.

        Args:
            source_text: The source code to format
            file_path: Path for error reporting (optional)

        Returns:
            FormattedResult with formatted text and status. On failure the
            original text is returned unchanged and the error is reported.
        """
        errors: List[str] = []
        warnings: List[str] = []

        try:
            result = self.reflow(source_text, file_path)
            formatted_text = apply_edits(source_text, result.edits)
            return FormattedResult(
                formatted_text=formatted_text,
                is_changed=formatted_text != source_text,
                errors=errors,
                warnings=warnings,
                comments=list(result.comments),
            )

        except CommentSyntaxError as e:
            errors.append(f"Parse error: {e.format()}")
        except ReflowError as e:
            errors.append(f"Formatting error: {e.format()}")

        logger.warning("Formatting %s failed: %s", file_path, errors[-1])
        return FormattedResult(
            formatted_text=source_text,
            is_changed=False,
            errors=errors,
            warnings=warnings,
        )
