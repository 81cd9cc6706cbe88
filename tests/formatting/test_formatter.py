"""Tests for the document comment formatter."""

import pytest

from commentwrap.config import ReflowOptions
from commentwrap.formatting import CommentFormatter, DefaultFormattingRules


class TestCommentFormatter:
    """Test the comment formatter functionality."""

    @pytest.mark.markdown
    def test_basic_formatting(self, era_source):
        """Adjacent comment lines are merged and code is kept."""
        formatter = CommentFormatter(DefaultFormattingRules.standard())
        result = formatter.format_document(era_source)

        assert result.success()
        assert result.is_changed
        assert result.formatted_text == (
            "// The start of an era. The end of an era.\n"
            "const era = new Era();\n"
        )
        assert [comment.text for comment in result.comments] == [
            "// The start of an era. The end of an era."
        ]

    def test_indented_run(self, function_source):
        """Runs inside a body keep their indentation; trailing comments stand alone."""
        formatter = CommentFormatter(DefaultFormattingRules.plain())
        result = formatter.format_document(function_source)

        assert result.success()
        lines = result.formatted_text.split("\n")
        assert lines[1] == "  // Multiply the two sides of the rectangle."
        assert lines[2] == "  return width * height; // trailing remark"

    def test_narrow_width_splits_lines(self, function_source):
        """A narrow comment width splits the run over more lines."""
        formatter = CommentFormatter(ReflowOptions(comment_width=24, prose_wrap="plain"))
        result = formatter.format_document(function_source)

        assert result.success()
        lines = result.formatted_text.split("\n")
        assert lines[1] == "  // Multiply the two"
        assert lines[2] == "  // sides of the"
        assert lines[3] == "  // rectangle."
        for line in lines[1:4]:
            assert len(line) <= 24

    def test_blocks_strings_and_paragraphs(self, mixed_source):
        """Block comments and strings are kept; blank lines still separate runs."""
        formatter = CommentFormatter(DefaultFormattingRules.plain())
        result = formatter.format_document(mixed_source)

        assert result.success()
        assert result.formatted_text.startswith(mixed_source.split("const url")[0])
        assert 'const url = "http://example.com"; // not a run start inside the string\n' in result.formatted_text
        assert result.formatted_text.endswith(
            "// first paragraph continues here\n"
            "\n"
            "// second paragraph\n"
        )

    def test_unchanged_document(self):
        """Already wrapped comments are reported as unchanged."""
        source = "// nothing to do here\nlet x = 1;\n"
        result = CommentFormatter(DefaultFormattingRules.plain()).format_document(source)

        assert result.success()
        assert not result.is_changed
        assert result.formatted_text == source

    @pytest.mark.markdown
    def test_ordered_list_is_kept(self):
        """A numbered list inside a comment run keeps its numbering."""
        source = "// Steps:\n//\n// 1. build\n// 2. test\n// 3. ship\n"
        result = CommentFormatter(DefaultFormattingRules.standard()).format_document(source)

        assert result.success()
        assert result.formatted_text == source
        assert "// 2. test" in result.formatted_text

    @pytest.mark.markdown
    def test_rule_comment_is_kept(self):
        """A // --- separator is not widened past the comment width."""
        source = "// ---\nlet x = 1;\n"
        result = CommentFormatter(ReflowOptions(comment_width=20)).format_document(source)

        assert result.success()
        assert result.formatted_text == source

    def test_crlf_line_endings_are_kept(self):
        """Split runs in a CRLF document are joined with CRLF."""
        source = "// one two three four five six\r\n// seven\r\ncode();\r\n"
        result = CommentFormatter(
            ReflowOptions(comment_width=20, prose_wrap="plain")
        ).format_document(source)

        assert result.success()
        assert result.formatted_text == (
            "// one two three\r\n// four five six\r\n// seven\r\ncode();\r\n"
        )
        assert result.formatted_text.count("\n") == result.formatted_text.count("\r\n")

    def test_crlf_indented_run(self):
        """Indented runs in a CRLF document repeat their indentation after CRLF."""
        source = "function f() {\r\n  // alpha beta gamma delta\r\n  return 1;\r\n}\r\n"
        result = CommentFormatter(
            ReflowOptions(comment_width=16, prose_wrap="plain")
        ).format_document(source)

        assert result.success()
        assert result.formatted_text == (
            "function f() {\r\n  // alpha beta\r\n  // gamma delta\r\n  return 1;\r\n}\r\n"
        )
        for comment in result.comments:
            assert result.formatted_text[comment.start:comment.end] == comment.text

    def test_parse_error_returns_original(self, unterminated_source):
        """An unterminated block comment is reported and nothing is changed."""
        result = CommentFormatter().format_document(unterminated_source, "broken.js")

        assert not result.success()
        assert result.formatted_text == unterminated_source
        assert not result.is_changed
        assert result.errors[0].startswith("Parse error: Unterminated block comment")
        assert "broken.js:2:0" in result.errors[0]

    def test_engine_failure_returns_original(self, era_source):
        """A failing prose engine is reported as a formatting error."""

        def broken(text, width):
            raise RuntimeError("boom")

        result = CommentFormatter(wrap=broken).format_document(era_source)

        assert not result.success()
        assert result.formatted_text == era_source
        assert result.errors[0].startswith("Formatting error: Prose engine failed")


class TestDefaultFormattingRules:
    """Preset options."""

    def test_presets(self):
        """Presets differ in width and engine only."""
        assert DefaultFormattingRules.standard() == ReflowOptions()
        assert DefaultFormattingRules.compact().comment_width == 100
        assert DefaultFormattingRules.plain().prose_wrap == "plain"
