"""Workspace configuration support for commentwrap."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigError

PROSE_WRAP_CHOICES = ("markdown", "plain")

CONFIG_FILE_CANDIDATES = ["commentwrap.toml", ".commentwraprc", "pyproject.toml"]

# camelCase spellings used by editor and plugin settings
_KEY_ALIASES = {
    "commentWidth": "comment_width",
    "preferSingleLineComments": "prefer_single_line_comments",
    "proseWrap": "prose_wrap",
}


@dataclass(frozen=True)
class ReflowOptions:
    """Options consumed by a reflow operation."""

    # Column at which comments wrap, independent of the code line width.
    comment_width: int = 80
    # Accepted for compatibility; block comment reflow does not consume it yet.
    prefer_single_line_comments: bool = False
    # Name of the prose engine, see commentwrap.reflow.wrapper.PROSE_ENGINES.
    prose_wrap: str = "markdown"

    def validate(self) -> "ReflowOptions":
        if isinstance(self.comment_width, bool) or not isinstance(self.comment_width, int):
            raise ConfigError(f"comment_width must be an integer, got {self.comment_width!r}")
        if self.comment_width < 1:
            raise ConfigError(
                f"comment_width must be at least 1, got {self.comment_width}",
                hint="The advised value is 80 regardless of the code line width",
            )
        if not isinstance(self.prefer_single_line_comments, bool):
            raise ConfigError(
                f"prefer_single_line_comments must be true or false, got {self.prefer_single_line_comments!r}"
            )
        if self.prose_wrap not in PROSE_WRAP_CHOICES:
            raise ConfigError(
                f"Unknown prose_wrap engine '{self.prose_wrap}'",
                hint=f"Choose one of: {', '.join(PROSE_WRAP_CHOICES)}",
            )
        return self


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path.name}: {exc.msg}", path=str(path), line=exc.lineno) from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path.name}: {exc}", path=str(path)) from exc


def _has_tool_section(path: Path) -> bool:
    return "commentwrap" in (_read_toml_config(path).get("tool") or {})


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_CANDIDATES:
        path = root / candidate
        if not path.exists():
            continue
        if path.name == "pyproject.toml" and not _has_tool_section(path):
            continue
        return path
    return None


def _reflow_section(path: Path) -> Dict[str, Any]:
    if path.suffix == ".toml":
        data = _read_toml_config(path)
        if path.name == "pyproject.toml":
            return (data.get("tool") or {}).get("commentwrap") or {}
        return data.get("reflow") or data
    return _read_json_config(path)


def parse_reflow_options(section: Dict[str, Any]) -> ReflowOptions:
    if not isinstance(section, dict):
        raise ConfigError("Reflow configuration must be a table of options")
    values: Dict[str, Any] = {}
    for key, raw in section.items():
        name = _KEY_ALIASES.get(key, key)
        if name in ("comment_width", "prefer_single_line_comments", "prose_wrap"):
            values[name] = raw

    comment_width = values.get("comment_width", ReflowOptions.comment_width)
    if isinstance(comment_width, str) and comment_width.strip().isdigit():
        comment_width = int(comment_width)
    prose_wrap = str(values.get("prose_wrap", ReflowOptions.prose_wrap))
    prefer_single = values.get("prefer_single_line_comments", ReflowOptions.prefer_single_line_comments)

    return ReflowOptions(
        comment_width=comment_width,
        prefer_single_line_comments=prefer_single,
        prose_wrap=prose_wrap,
    ).validate()


def load_reflow_options(root: Path, explicit: Optional[Path] = None) -> ReflowOptions:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError(f"Configuration file not found: {explicit}", path=str(explicit))
        return ReflowOptions()
    return parse_reflow_options(_reflow_section(config_path))


def apply_cli_overrides(
    options: ReflowOptions,
    *,
    comment_width: Optional[int] = None,
    prose_wrap: Optional[str] = None,
) -> ReflowOptions:
    updated = options
    if comment_width is not None:
        updated = replace(updated, comment_width=comment_width)
    if prose_wrap is not None:
        updated = replace(updated, prose_wrap=prose_wrap)
    return updated.validate()


__all__ = [
    "ReflowOptions",
    "PROSE_WRAP_CHOICES",
    "locate_config_file",
    "parse_reflow_options",
    "load_reflow_options",
    "apply_cli_overrides",
]
