"""One-call entry points: source text in, syntax tree out."""

from typing import Any, Mapping

from .ast_nodes import Program
from .options import Options
from .parser import ParseError
from .private import PrivateNameLexer, PrivateNameParser
from .tokens import Token


def _resolve_options(options: Options | Mapping[str, Any] | None, kwargs) -> Options:
    if isinstance(options, Options):
        if kwargs:
            raise TypeError("pass either an Options instance or keyword options, not both")
        return options
    settings = dict(options or {})
    settings.update(kwargs)
    return Options(**settings)


def tokenize(source: str, filename: str = "<stdin>") -> list[Token]:
    return PrivateNameLexer(source, filename).tokenize()


def parse_with_diagnostics(source: str, options=None, filename: str = "<stdin>",
                           **kwargs) -> tuple[Program, list[ParseError]]:
    """Parse ``source`` and also return the recoverable diagnostics.

    Fatal problems raise LexerError or ParseError.
    """
    opts = _resolve_options(options, kwargs)
    parser = PrivateNameParser(tokenize(source, filename), opts)
    program = parser.parse()
    return program, parser.recoverable


def parse(source: str, options=None, filename: str = "<stdin>", **kwargs) -> Program:
    program, _ = parse_with_diagnostics(source, options, filename, **kwargs)
    return program
