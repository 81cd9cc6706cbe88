"""Handler registration helpers."""

from __future__ import annotations

from . import formatting


def register_all(server) -> None:
    formatting.register(server)


__all__ = ["register_all"]
