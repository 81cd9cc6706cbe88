"""Formatting handler."""

from __future__ import annotations

from lsprotocol.types import DocumentFormattingParams


def register(server) -> None:
    workspace = server.workspace_index

    @server.feature("textDocument/formatting")
    def _format(ls, params: DocumentFormattingParams):
        uri = params.text_document.uri
        document = ls.workspace.get_text_document(uri)
        return workspace.format_text(document.source, uri)
