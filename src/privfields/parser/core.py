"""Parser core: token manipulation, error handling, and parse() entry point."""

from contextlib import contextmanager

from ..ast_nodes import Identifier, Program
from ..options import Options
from ..tokens import (
    KEYWORD_TYPES, KEYWORDS, RESERVED_WORDS, STRICT_RESERVED_WORDS,
    Token, TokenType,
)


class ParseError(Exception):
    def __init__(self, message: str, line: int, col: int):
        self.message = message
        self.line = line
        self.col = col
        super().__init__(f"{message} at {line}:{col}")


class StaticPrototypeError(ParseError):
    pass


class GetterParamsError(ParseError):
    pass


class SetterArityError(ParseError):
    pass


class SetterRestParamError(ParseError):
    pass


class ParserBase:
    def __init__(self, tokens: list[Token], options: Options | None = None):
        self.tokens = tokens
        self.pos = 0
        self.options = options or Options()
        # Soft diagnostics; parsing continues past them
        self.recoverable: list[ParseError] = []
        self.strict = self.options.source_type == "module"
        self.in_function = False
        self.in_async = False
        self.in_generator = False

    def parse(self) -> Program:
        body = []
        while not self._at_end():
            body.append(self._parse_statement())
        return Program(body=body, source_type=self.options.source_type)

    # ---- Token helpers ----

    def _peek(self, offset: int = 0) -> Token:
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return self.tokens[-1]  # EOF

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        if tok.type != TokenType.EOF:
            self.pos += 1
        return tok

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _check(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _match(self, *types: TokenType) -> Token | None:
        if self._peek().type in types:
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, msg: str = "") -> Token:
        tok = self._peek()
        if tok.type == token_type:
            return self._advance()
        if msg:
            raise ParseError(f"Expected {msg}, got '{tok.value}'", tok.line, tok.col)
        raise self._unexpected(tok)

    def _error(self, msg: str, tok: Token | None = None) -> ParseError:
        tok = tok or self._peek()
        return ParseError(msg, tok.line, tok.col)

    def _error_at(self, msg: str, node) -> ParseError:
        return ParseError(msg, node.line, node.col)

    def _unexpected(self, tok: Token | None = None) -> ParseError:
        tok = tok or self._peek()
        if tok.type == TokenType.EOF:
            return ParseError("Unexpected end of input", tok.line, tok.col)
        text = f"#{tok.value}" if tok.type == TokenType.PRIVATE_NAME else tok.value
        return ParseError(f"Unexpected token '{text}'", tok.line, tok.col)

    def _raise_recoverable(self, error: ParseError):
        self.recoverable.append(error)

    # ---- Contextual keywords and ASI ----

    def _is_contextual(self, word: str) -> bool:
        tok = self._peek()
        return tok.type == TokenType.NAME and tok.value == word

    def _eat_contextual(self, word: str) -> bool:
        if self._is_contextual(word):
            self._advance()
            return True
        return False

    def _can_insert_semicolon(self) -> bool:
        tok = self._peek()
        return tok.type in (TokenType.EOF, TokenType.RBRACE) or tok.nl_before

    def _semicolon(self):
        if not self._match(TokenType.SEMICOLON) and not self._can_insert_semicolon():
            raise self._unexpected()

    # ---- Identifiers ----

    def _is_word(self, tok: Token) -> bool:
        return tok.type == TokenType.NAME or tok.type in KEYWORD_TYPES

    def _parse_ident(self, liberal: bool = False) -> Identifier:
        tok = self._peek()
        if not self._is_word(tok):
            raise self._unexpected(tok)
        self._advance()
        node = Identifier(name=tok.value, line=tok.line, col=tok.col)
        if not liberal or self.options.allow_reserved == "never":
            self._check_unreserved(node.name, node.line, node.col)
        return node

    def _check_unreserved(self, name: str, line: int, col: int):
        if self.in_generator and name == "yield":
            raise ParseError("Cannot use 'yield' as identifier inside a generator", line, col)
        if self.in_async and name == "await":
            raise ParseError("Cannot use 'await' as identifier inside an async function", line, col)
        if name in KEYWORDS:
            raise ParseError(f"Unexpected keyword '{name}'", line, col)
        reserved = set() if self.options.allow_reserved is True else set(RESERVED_WORDS)
        if self.strict:
            reserved |= STRICT_RESERVED_WORDS
        if name in reserved:
            self._raise_recoverable(ParseError(f"The keyword '{name}' is reserved", line, col))

    # ---- Scoped parser state ----

    @contextmanager
    def _scoped(self, **flags):
        """Set parser attributes for the duration of a sub-parse."""
        saved = {name: getattr(self, name) for name in flags}
        for name, value in flags.items():
            setattr(self, name, value)
        try:
            yield
        finally:
            for name, value in saved.items():
                setattr(self, name, value)
