"""Tests for reflow option loading."""

import json

import pytest

from commentwrap.config import (
    ReflowOptions,
    apply_cli_overrides,
    load_reflow_options,
    locate_config_file,
    parse_reflow_options,
)
from commentwrap.errors import ConfigError


class TestReflowOptions:
    """Validation of option values."""

    def test_defaults(self):
        """The advised comment width is 80 with markdown rewrapping."""
        options = ReflowOptions().validate()
        assert options.comment_width == 80
        assert options.prose_wrap == "markdown"
        assert options.prefer_single_line_comments is False

    @pytest.mark.parametrize("width", [0, -4, True, "80", 12.5])
    def test_rejects_bad_width(self, width):
        """Widths must be positive integers."""
        with pytest.raises(ConfigError):
            ReflowOptions(comment_width=width).validate()

    @pytest.mark.parametrize("flag", ["false", "yes", 0, None])
    def test_rejects_non_bool_single_line_flag(self, flag):
        """prefer_single_line_comments must be a real boolean."""
        with pytest.raises(ConfigError):
            ReflowOptions(prefer_single_line_comments=flag).validate()

    def test_rejects_unknown_engine(self):
        """Only the known prose engines are accepted."""
        with pytest.raises(ConfigError) as exc_info:
            ReflowOptions(prose_wrap="rst").validate()
        assert "plain" in exc_info.value.hint


class TestConfigFiles:
    """Discovery and parsing of configuration files."""

    def test_no_config_gives_defaults(self, tmp_path):
        """Without a configuration file the defaults apply."""
        assert locate_config_file(tmp_path) is None
        assert load_reflow_options(tmp_path) == ReflowOptions()

    def test_toml_reflow_table(self, tmp_path):
        """commentwrap.toml may keep its options under [reflow]."""
        (tmp_path / "commentwrap.toml").write_text(
            '[reflow]\ncomment_width = 72\nprose_wrap = "plain"\n', encoding="utf-8"
        )
        options = load_reflow_options(tmp_path)
        assert options == ReflowOptions(comment_width=72, prose_wrap="plain")

    def test_toml_top_level(self, tmp_path):
        """Options may also sit at the top level of commentwrap.toml."""
        (tmp_path / "commentwrap.toml").write_text("comment_width = 60\n", encoding="utf-8")
        assert load_reflow_options(tmp_path).comment_width == 60

    def test_rc_file_with_camel_case(self, tmp_path):
        """.commentwraprc is JSON and accepts editor style keys."""
        (tmp_path / ".commentwraprc").write_text(
            json.dumps({"commentWidth": 100, "preferSingleLineComments": True}), encoding="utf-8"
        )
        options = load_reflow_options(tmp_path)
        assert options.comment_width == 100
        assert options.prefer_single_line_comments is True

    def test_pyproject_tool_table(self, tmp_path):
        """pyproject.toml counts only when it has a [tool.commentwrap] table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "demo"\n', encoding="utf-8")
        assert locate_config_file(tmp_path) is None

        pyproject.write_text(
            '[project]\nname = "demo"\n\n[tool.commentwrap]\ncomment_width = 90\n', encoding="utf-8"
        )
        assert locate_config_file(tmp_path) == pyproject
        assert load_reflow_options(tmp_path).comment_width == 90

    def test_candidate_order(self, tmp_path):
        """commentwrap.toml wins over the other candidates."""
        (tmp_path / "commentwrap.toml").write_text("comment_width = 50\n", encoding="utf-8")
        (tmp_path / ".commentwraprc").write_text('{"commentWidth": 70}', encoding="utf-8")
        assert load_reflow_options(tmp_path).comment_width == 50

    def test_explicit_missing_file(self, tmp_path):
        """An explicitly requested file must exist."""
        with pytest.raises(ConfigError):
            load_reflow_options(tmp_path, tmp_path / "missing.toml")

    def test_invalid_json(self, tmp_path):
        """Broken JSON is reported with its location."""
        (tmp_path / ".commentwraprc").write_text("{\n  oops\n}", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_reflow_options(tmp_path)
        assert exc_info.value.line == 2

    def test_invalid_toml(self, tmp_path):
        """Broken TOML is a configuration error."""
        (tmp_path / "commentwrap.toml").write_text("comment_width = = 3\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_reflow_options(tmp_path)


class TestParsing:
    """Conversion of raw tables into options."""

    def test_numeric_string_width(self):
        """A width written as a numeric string is accepted."""
        assert parse_reflow_options({"comment_width": "64"}).comment_width == 64

    def test_unknown_keys_ignored(self):
        """Keys that are not reflow options are skipped."""
        assert parse_reflow_options({"printWidth": 120}) == ReflowOptions()

    def test_string_flag_rejected(self):
        """A quoted "false" is an error rather than a truthy string."""
        with pytest.raises(ConfigError) as exc_info:
            parse_reflow_options({"preferSingleLineComments": "false"})
        assert "prefer_single_line_comments" in str(exc_info.value)

    def test_bool_flag_accepted(self):
        """Real booleans pass through unchanged."""
        assert parse_reflow_options({"preferSingleLineComments": True}).prefer_single_line_comments is True

    def test_non_table_rejected(self):
        """The section must be a table."""
        with pytest.raises(ConfigError):
            parse_reflow_options(["comment_width"])

    def test_cli_overrides(self):
        """Command-line values replace configured ones and are validated."""
        options = apply_cli_overrides(ReflowOptions(), comment_width=66, prose_wrap="plain")
        assert options == ReflowOptions(comment_width=66, prose_wrap="plain")
        assert apply_cli_overrides(options) == options
        with pytest.raises(ConfigError):
            apply_cli_overrides(options, comment_width=0)
