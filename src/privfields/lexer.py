"""Lexer for the privfields JavaScript grammar.

Produces the whole token list up front. Every token records whether a line
terminator preceded it, which is all the parser needs for automatic
semicolon insertion. Dispatch on the first character of a token goes
through ``_read_token`` so grammar extensions can claim new characters.
"""

from .lexer_literals import read_number, read_string
from .tokens import KEYWORDS, OPERATORS, Token, TokenType


class LexerError(Exception):
    def __init__(self, message: str, line: int, col: int):
        self.message = message
        self.line = line
        self.col = col
        super().__init__(f"{message} at {line}:{col}")


def is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch in ('_', '$')


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in ('_', '$')


class Lexer:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []
        self._saw_newline = False

        self._op_trie = _build_trie(OPERATORS)

    def tokenize(self) -> list[Token]:
        while self.pos < len(self.source):
            self._skip_whitespace_and_comments()
            if self.pos >= len(self.source):
                break
            self._read_token(self.source[self.pos])

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.col,
                                 self.pos, self._saw_newline))
        return self.tokens

    def _read_token(self, ch: str):
        """Read one token starting at ``ch``, the current character."""
        if ch in ('"', "'"):
            read_string(self)
        elif ch.isdigit() or (ch == '.' and self._peek(1).isdigit()):
            read_number(self)
        elif is_identifier_start(ch):
            self._read_identifier()
        else:
            self._read_operator()

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _emit(self, token_type: TokenType, value: str, line: int, col: int,
              pos: int):
        self.tokens.append(Token(token_type, value, line, col, pos,
                                 self._saw_newline))
        self._saw_newline = False

    def read_word(self) -> str:
        """Consume a maximal run of identifier characters and return it."""
        start = self.pos
        while self.pos < len(self.source) and is_identifier_char(self._peek()):
            self._advance()
        return self.source[start:self.pos]

    # --- Whitespace and comments ---

    def _skip_whitespace_and_comments(self):
        while self.pos < len(self.source):
            ch = self._peek()
            if ch in ('\n', '\r', '\u2028', '\u2029'):
                self._saw_newline = True
                self._advance()
            elif ch.isspace():
                self._advance()
            elif ch == '/' and self._peek(1) == '/':
                self._skip_line_comment()
            elif ch == '/' and self._peek(1) == '*':
                self._skip_block_comment()
            else:
                break

    def _skip_line_comment(self):
        self._advance()  # /
        self._advance()  # /
        while self.pos < len(self.source) and self._peek() not in ('\n', '\r'):
            self._advance()

    def _skip_block_comment(self):
        start_line = self.line
        start_col = self.col
        self._advance()  # /
        self._advance()  # *
        while self.pos < len(self.source):
            if self._peek() == '*' and self._peek(1) == '/':
                self._advance()
                self._advance()
                return
            if self._peek() in ('\n', '\r'):
                self._saw_newline = True
            self._advance()
        raise LexerError("Unterminated comment", start_line, start_col)

    # --- Identifier / keyword ---

    def _read_identifier(self):
        line, col, start = self.line, self.col, self.pos
        value = self.read_word()
        token_type = KEYWORDS.get(value, TokenType.NAME)
        self._emit(token_type, value, line, col, start)

    # --- Operators and punctuation (trie-based longest match) ---

    def _read_operator(self):
        line, col, start = self.line, self.col, self.pos

        node = self._op_trie
        best_match = None
        best_len = 0
        i = 0
        while self.pos + i < len(self.source):
            ch = self.source[self.pos + i]
            if ch not in node:
                break
            node = node[ch]
            i += 1
            if '' in node:  # terminal marker
                best_match = node['']
                best_len = i

        if best_match is not None:
            value = self.source[self.pos:self.pos + best_len]
            for _ in range(best_len):
                self._advance()
            self._emit(best_match, value, line, col, start)
            return

        ch = self._peek()
        raise LexerError(f"Unexpected character '{ch}'", line, col)


def _build_trie(operators: dict[str, TokenType]) -> dict:
    """Build a trie from operator strings for longest-match tokenization.

    Each node is a dict mapping character -> child node.
    Terminal nodes have '' -> TokenType entry.
    """
    root: dict = {}
    for op, token_type in operators.items():
        node = root
        for ch in op:
            if ch not in node:
                node[ch] = {}
            node = node[ch]
        node[''] = token_type  # terminal marker
    return root
