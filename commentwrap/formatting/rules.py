"""Default reflow option presets."""

from __future__ import annotations

from commentwrap.config import ReflowOptions


class DefaultFormattingRules:
    """Preset reflow options."""

    @classmethod
    def standard(cls) -> ReflowOptions:
        """80 column comments rewrapped as markdown."""
        return ReflowOptions(
            comment_width=80,
            prefer_single_line_comments=False,
            prose_wrap="markdown",
        )

    @classmethod
    def compact(cls) -> ReflowOptions:
        """Wider comments for codebases with long lines."""
        return ReflowOptions(
            comment_width=100,
            prefer_single_line_comments=False,
            prose_wrap="markdown",
        )

    @classmethod
    def plain(cls) -> ReflowOptions:
        """80 column comments rewrapped as plain text, without markdown escaping."""
        return ReflowOptions(
            comment_width=80,
            prefer_single_line_comments=False,
            prose_wrap="plain",
        )
