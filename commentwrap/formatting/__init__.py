"""
Comment reflow formatter for C-family sources.

This module provides a formatter that:
1. Scans source text for comments
2. Rewraps runs of adjacent line comments at the comment width
3. Keeps every surviving comment's position valid
4. Integrates with both CLI and LSP
"""

from __future__ import annotations

__all__ = ["CommentFormatter", "FormattedResult", "DefaultFormattingRules"]

from .core import CommentFormatter, FormattedResult
from .rules import DefaultFormattingRules
