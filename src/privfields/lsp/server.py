#!/usr/bin/env python3
"""privfields Language Server.

Publishes parse diagnostics for JavaScript documents that use private class
members and static fields.
"""

import logging
import sys

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from ..options import Options
from .diagnostics import AnalysisResult, compute_diagnostics

logger = logging.getLogger("privfields-lsp")

server = LanguageServer("privfields-lsp", "0.1.0")

# Parser settings, replaced from initializationOptions
_options = Options()

# Cache: uri -> AnalysisResult (latest)
_analysis_cache: dict[str, AnalysisResult] = {}


def _validate_document(uri: str, source: str):
    """Parse the document and publish diagnostics."""
    result = compute_diagnostics(uri, source, _options)
    _analysis_cache[uri] = result
    logger.info("%s: %d diagnostic(s)", uri, len(result.diagnostics))
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=result.diagnostics)
    )


@server.feature(lsp.INITIALIZE)
def initialize(params: lsp.InitializeParams):
    global _options
    settings = params.initialization_options
    if isinstance(settings, dict):
        try:
            _options = Options.from_mapping(settings)
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring invalid initializationOptions: %s", e)


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams):
    _validate_document(
        params.text_document.uri,
        params.text_document.text,
    )


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_SAVE)
def did_save(params: lsp.DidSaveTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    _analysis_cache.pop(uri, None)
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=[])
    )


def main():
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    server.start_io()


if __name__ == "__main__":
    main()
