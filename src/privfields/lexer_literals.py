"""Literal tokenization: strings and numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tokens import TokenType

if TYPE_CHECKING:
    from .lexer import Lexer


_SIMPLE_ESCAPES = {
    'n': '\n', 't': '\t', 'r': '\r', 'b': '\b',
    'f': '\f', 'v': '\v', '0': '\0',
}

_LINE_TERMINATORS = ('\n', '\r', '\u2028', '\u2029')


def read_string(lex: Lexer):
    """Read a single- or double-quoted string literal, decoding escapes."""
    from .lexer import LexerError
    line, col, start = lex.line, lex.col, lex.pos
    quote = lex._advance()
    chars: list[str] = []
    while lex.pos < len(lex.source):
        ch = lex._peek()
        if ch == quote:
            lex._advance()
            lex._emit(TokenType.STRING, ''.join(chars), line, col, start)
            return
        if ch == '\\':
            lex._advance()
            chars.append(_read_escape(lex, line, col))
        elif ch in ('\n', '\r'):
            raise LexerError("Unterminated string constant", line, col)
        else:
            chars.append(lex._advance())
    raise LexerError("Unterminated string constant", line, col)


def _read_escape(lex: Lexer, line: int, col: int) -> str:
    from .lexer import LexerError
    if lex.pos >= len(lex.source):
        raise LexerError("Unterminated string constant", line, col)
    ch = lex._advance()
    if ch in _SIMPLE_ESCAPES and not (ch == '0' and lex._peek().isdigit()):
        return _SIMPLE_ESCAPES[ch]
    if ch == 'x':
        return chr(_read_hex(lex, 2, line, col))
    if ch == 'u':
        if lex._peek() == '{':
            lex._advance()
            digits = []
            while lex.pos < len(lex.source) and lex._peek() != '}':
                digits.append(lex._advance())
            if lex.pos >= len(lex.source) or not digits:
                raise LexerError("Bad character escape sequence", line, col)
            lex._advance()  # }
            try:
                code = int(''.join(digits), 16)
            except ValueError:
                raise LexerError("Bad character escape sequence", line, col)
            if code > 0x10FFFF:
                raise LexerError("Code point out of bounds", line, col)
            return chr(code)
        return chr(_read_hex(lex, 4, line, col))
    if ch == '\r':
        # Line continuation
        if lex._peek() == '\n':
            lex._advance()
        return ''
    if ch in _LINE_TERMINATORS:
        return ''
    if ch.isdigit():
        raise LexerError("Octal literal in template or strict string", line, col)
    return ch


def _read_hex(lex: Lexer, length: int, line: int, col: int) -> int:
    from .lexer import LexerError
    digits = lex.source[lex.pos:lex.pos + length]
    if len(digits) != length or not all(_is_hex_digit(d) for d in digits):
        raise LexerError("Bad character escape sequence", line, col)
    for _ in range(length):
        lex._advance()
    return int(digits, 16)


def read_number(lex: Lexer):
    """Read a numeric literal (decimal, hex, binary, octal)."""
    from .lexer import LexerError
    line, col = lex.line, lex.col
    start = lex.pos

    if lex._peek() == '0' and lex._peek(1) in 'xXoObB':
        prefix = lex._peek(1).lower()
        valid = {'x': '0123456789abcdefABCDEF', 'o': '01234567', 'b': '01'}[prefix]
        lex._advance()  # 0
        lex._advance()  # x / o / b
        if lex._peek() not in valid:
            raise LexerError(f"Expected number in radix {_RADIX[prefix]}", line, col)
        while lex.pos < len(lex.source) and lex._peek() in valid:
            lex._advance()
        _check_number_end(lex, line, col)
        lex._emit(TokenType.NUM, lex.source[start:lex.pos], line, col, start)
        return

    while lex.pos < len(lex.source) and lex._peek().isdigit():
        lex._advance()

    if lex._peek() == '.':
        lex._advance()
        while lex.pos < len(lex.source) and lex._peek().isdigit():
            lex._advance()

    if lex._peek() in ('e', 'E'):
        lex._advance()
        if lex._peek() in ('+', '-'):
            lex._advance()
        if not lex._peek().isdigit():
            raise LexerError("Invalid number", line, col)
        while lex.pos < len(lex.source) and lex._peek().isdigit():
            lex._advance()

    _check_number_end(lex, line, col)
    lex._emit(TokenType.NUM, lex.source[start:lex.pos], line, col, start)


_RADIX = {'x': 16, 'o': 8, 'b': 2}


def _check_number_end(lex: Lexer, line: int, col: int):
    from .lexer import LexerError, is_identifier_start
    if is_identifier_start(lex._peek()):
        raise LexerError("Identifier directly after number", line, col)


def number_value(raw: str) -> int | float:
    """Convert the raw text of a NUM token to its numeric value."""
    lowered = raw.lower()
    if lowered.startswith(('0x', '0o', '0b')):
        return int(raw, 0)
    if '.' in raw or 'e' in lowered:
        return float(raw)
    return int(raw)


def _is_hex_digit(ch: str) -> bool:
    return ch in '0123456789abcdefABCDEF'
