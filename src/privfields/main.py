#!/usr/bin/env python3
"""privfields: check JavaScript classes that use private members and static fields.

Usage: privfields <input.js> [--ecma-version N] [--allow-reserved {true,false,never}]
                  [--source-type {script,module}] [--emit-tokens] [--emit-ast]
"""

import argparse
import os
import sys

from .lexer import LexerError
from .options import Options
from .parser import ParseError
from .private import PrivateNameLexer, PrivateNameParser

_ALLOW_RESERVED = {"true": True, "false": False, "never": "never"}


def _format_error(source: str, filename: str, message: str,
                  line: int, col: int, level: str = "error") -> str:
    """Format a diagnostic with source context and caret."""
    lines = source.split('\n')
    if line < 1 or line > len(lines):
        return f"{level}: {message}\n --> {filename}:{line}:{col}"
    source_line = lines[line - 1]
    width = len(str(line))
    pad = " " * width
    caret_offset = max(col - 1, 0)
    caret = " " * caret_offset + "^"
    return (
        f"{level}: {message}\n"
        f" {pad}--> {filename}:{line}:{col}\n"
        f" {pad} |\n"
        f" {line} | {source_line}\n"
        f" {pad} | {caret}"
    )


def build_arg_parser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="privfields",
        description="Parse JavaScript with private class members and static fields")
    argparser.add_argument("input", help="Input .js file")
    argparser.add_argument("--ecma-version", type=int, default=2022,
                           help="Edition number or year (default: 2022)")
    argparser.add_argument("--allow-reserved", choices=sorted(_ALLOW_RESERVED),
                           default="true", help="Reserved word policy")
    argparser.add_argument("--source-type", choices=["script", "module"],
                           default="script")
    argparser.add_argument("--emit-tokens", action="store_true", help="Print token stream")
    argparser.add_argument("--emit-ast", action="store_true", help="Print AST")
    return argparser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        options = Options(ecma_version=args.ecma_version,
                          allow_reserved=_ALLOW_RESERVED[args.allow_reserved],
                          source_type=args.source_type)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        with open(args.input, "r") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found", file=sys.stderr)
        return 1

    filename = os.path.basename(args.input)

    # Lexing
    try:
        tokens = PrivateNameLexer(source, filename).tokenize()
    except LexerError as e:
        print(_format_error(source, filename, e.message, e.line, e.col),
              file=sys.stderr)
        return 1

    if args.emit_tokens:
        for tok in tokens:
            print(tok)
        return 0

    # Parsing
    parser = PrivateNameParser(tokens, options)
    try:
        program = parser.parse()
    except ParseError as e:
        print(_format_error(source, filename, e.message, e.line, e.col),
              file=sys.stderr)
        return 1

    for warn in parser.recoverable:
        print(_format_error(source, filename, warn.message, warn.line, warn.col,
                            level="warning"), file=sys.stderr)

    if args.emit_ast:
        import pprint
        pprint.pprint(program)
        return 0

    print(f"OK {args.input}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
