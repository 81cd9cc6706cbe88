"""
Comment reflow toolkit (commentwrap).

This package rewraps groups of adjacent ``//`` comments in C-family source
files into word-wrapped prose while keeping every surviving comment node's
offsets, line numbers and columns valid.

The code is organised into several modules:

* ``nodes`` – immutable dataclasses describing comment nodes and their
  source locations.
* ``source`` – a scanner that extracts comment nodes from source text, and
  the blank-line probe used to preserve paragraph separation.
* ``reflow`` – the reflow engine: run accumulation, text reflow, node
  rebuilding, drift tracking and output filtering.
* ``printer`` – splices reflowed runs back into the original text.
* ``formatting`` – a document-level facade used by the CLI and the LSP.
* ``cli`` – the ``commentwrap`` command line interface.
* ``lsp`` – a pygls language server exposing document formatting.
"""

import tomllib
from importlib import metadata as _metadata
from pathlib import Path


def _source_tree_version() -> str | None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    try:
        with pyproject.open("rb") as handle:
            return tomllib.load(handle).get("project", {}).get("version")
    except (OSError, tomllib.TOMLDecodeError):  # pragma: no cover - checkout without packaging files
        return None


try:  # pragma: no cover - installed distribution
    __version__ = _metadata.version("commentwrap")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _source_tree_version() or "0.1.0"

__all__ = ["__version__"]
