"""Diagnostic computation for JavaScript documents.

Runs the lexer and the private-member parser on source text and converts
fatal errors and recoverable diagnostics into LSP Diagnostic objects.
"""

from dataclasses import dataclass, field
from typing import Optional

from lsprotocol import types as lsp

from ..ast_nodes import Program
from ..lexer import LexerError
from ..options import Options
from ..parser import ParseError
from ..private import PrivateNameLexer, PrivateNameParser
from ..private.errors import RECOVERABLE_ERRORS
from ..tokens import Token


@dataclass
class AnalysisResult:
    """Result of checking one version of a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    tokens: Optional[list[Token]] = None
    ast: Optional[Program] = None


def _make_diagnostic(
    line: int,
    col: int,
    message: str,
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
    source: str = "privfields",
) -> lsp.Diagnostic:
    """Create an LSP Diagnostic.

    The parser uses 1-based line/col; LSP uses 0-based.
    """
    line_0 = max(0, line - 1)
    col_0 = max(0, col - 1)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=line_0, character=col_0),
            end=lsp.Position(line=line_0, character=col_0 + 1),
        ),
        message=message,
        severity=severity,
        source=source,
    )


def _severity(error: ParseError) -> lsp.DiagnosticSeverity:
    if isinstance(error, RECOVERABLE_ERRORS):
        return lsp.DiagnosticSeverity.Warning
    return lsp.DiagnosticSeverity.Error


def compute_diagnostics(uri: str, source: str,
                        options: Optional[Options] = None) -> AnalysisResult:
    """Parse the document and return its diagnostics."""
    result = AnalysisResult(uri=uri, source=source)

    # Lexing
    try:
        tokens = PrivateNameLexer(source, uri).tokenize()
        result.tokens = tokens
    except LexerError as e:
        result.diagnostics.append(_make_diagnostic(e.line, e.col, e.message))
        return result

    # Parsing
    parser = PrivateNameParser(tokens, options)
    try:
        result.ast = parser.parse()
    except ParseError as e:
        result.diagnostics.append(_make_diagnostic(e.line, e.col, e.message,
                                                   severity=_severity(e)))

    # Recoverable diagnostics found before a fatal error are still reported
    for warn in parser.recoverable:
        result.diagnostics.append(_make_diagnostic(
            warn.line, warn.col, warn.message, severity=_severity(warn)))

    return result
