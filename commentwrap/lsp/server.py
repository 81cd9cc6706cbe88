"""pygls based Language Server entrypoint."""

from __future__ import annotations

import logging
import os

from lsprotocol.types import InitializedParams
from pygls.server import LanguageServer

from commentwrap import __version__

from .handlers import register_all
from .workspace import ReflowWorkspace

logger = logging.getLogger(__name__)


class CommentwrapLanguageServer(LanguageServer):
    """Concrete LanguageServer exposing comment reflow as document formatting."""

    def __init__(self) -> None:
        super().__init__(name="commentwrap-lsp", version=__version__)
        self.workspace_index = ReflowWorkspace()
        register_all(self)
        self._register_lifecycle_handlers()

    def _register_lifecycle_handlers(self) -> None:
        workspace = self.workspace_index

        @self.feature("initialized")
        def _on_initialized(ls: "CommentwrapLanguageServer", params: InitializedParams) -> None:  # noqa: ARG001
            workspace.set_root(ls.workspace.root_uri)
            logger.info("Reflow options loaded from %s", workspace.root_path)


def create_server() -> CommentwrapLanguageServer:
    return CommentwrapLanguageServer()


def main() -> None:
    server = create_server()
    logger.info("Starting commentwrap LSP (pid=%s)", os.getpid())
    server.start_io()
