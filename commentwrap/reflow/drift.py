"""Accumulated position drift caused by reflowed runs."""

from __future__ import annotations

from dataclasses import dataclass

from ..nodes import Comment


@dataclass(frozen=True)
class Drift:
    """Line and character correction owed to nodes after processed runs.

    ``lines`` is the sum of (new node count - old node count) and
    ``characters`` the sum of (old run end - new run end). A run that shrank
    leaves a positive ``characters`` value, so later offsets move back by it.
    """

    lines: int = 0
    characters: int = 0

    @property
    def is_zero(self) -> bool:
        return self.lines == 0 and self.characters == 0

    def record(self, *, old_count: int, new_count: int, old_end: int, new_end: int) -> "Drift":
        return Drift(
            lines=self.lines + (new_count - old_count),
            characters=self.characters + (old_end - new_end),
        )

    def apply(self, comment: Comment) -> Comment:
        """Move a node that has not been reflowed to its corrected position."""
        return comment.shifted(lines=self.lines, characters=-self.characters)

    def offset(self, original: int) -> int:
        return original - self.characters

    def line(self, original: int) -> int:
        return original + self.lines


__all__ = ["Drift"]
