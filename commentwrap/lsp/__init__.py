"""Language Server Protocol implementation for commentwrap."""

from .workspace import ReflowWorkspace

__all__ = [
    "ReflowWorkspace",
]
