"""Primary expressions: literals, identifiers, grouping, array and object literals."""

from ..lexer_literals import number_value
from ..tokens import TokenType
from ..ast_nodes import (
    ArrayLiteral, BoolLiteral, Identifier, NullLiteral, NumberLiteral,
    ObjectLiteral, Property, SpreadElement, StringLiteral, SuperExpr, ThisExpr,
)

# Tokens after a `get`/`set`/`async` word that make the word itself the key
_KEY_FOLLOWERS = (
    TokenType.COMMA, TokenType.RBRACE, TokenType.COLON, TokenType.LPAREN,
    TokenType.EQ,
)


class PrimaryMixin:

    def _parse_expr_atom(self):
        tok = self._peek()

        if tok.type == TokenType.SUPER:
            self._advance()
            if not self._check(TokenType.LPAREN, TokenType.DOT, TokenType.LBRACKET):
                raise self._unexpected()
            return SuperExpr(line=tok.line, col=tok.col)

        if tok.type == TokenType.THIS:
            self._advance()
            return ThisExpr(line=tok.line, col=tok.col)

        if tok.type == TokenType.NAME:
            if self._is_async_function():
                self._advance()
                return self._parse_function(is_statement=False, is_async=True)
            ident = self._parse_ident()
            nxt = self._peek()
            if nxt.type == TokenType.FAT_ARROW and not nxt.nl_before:
                return self._parse_arrow([self._param_from_ident(ident)], tok)
            return ident

        if tok.type == TokenType.NUM:
            self._advance()
            return NumberLiteral(value=number_value(tok.value), raw=tok.value,
                                 line=tok.line, col=tok.col)
        if tok.type == TokenType.STRING:
            self._advance()
            return StringLiteral(value=tok.value, line=tok.line, col=tok.col)
        if tok.type in (TokenType.TRUE, TokenType.FALSE):
            self._advance()
            return BoolLiteral(value=tok.type == TokenType.TRUE,
                               line=tok.line, col=tok.col)
        if tok.type == TokenType.NULL:
            self._advance()
            return NullLiteral(line=tok.line, col=tok.col)

        if tok.type == TokenType.LPAREN:
            return self._parse_paren_and_distinguish()
        if tok.type == TokenType.LBRACKET:
            self._advance()
            elements = self._parse_expr_list(TokenType.RBRACKET, allow_holes=True)
            return ArrayLiteral(elements=elements, line=tok.line, col=tok.col)
        if tok.type == TokenType.LBRACE:
            return self._parse_object()
        if tok.type == TokenType.FUNCTION:
            return self._parse_function(is_statement=False)
        if tok.type == TokenType.CLASS:
            return self._parse_class(is_statement=False)
        if tok.type == TokenType.NEW:
            return self._parse_new()

        raise self._unexpected(tok)

    def _parse_paren_and_distinguish(self):
        tok = self._peek()
        if self._is_arrow_params():
            params = self._parse_params()
            return self._parse_arrow(params, tok)
        self._advance()
        expr = self._parse_expression()
        self._expect(TokenType.RPAREN)
        return expr

    # ---- Object literals ----

    def _parse_object(self) -> ObjectLiteral:
        tok = self._expect(TokenType.LBRACE)
        properties = []
        first = True
        while not self._match(TokenType.RBRACE):
            if not first:
                self._expect(TokenType.COMMA)
                if self._match(TokenType.RBRACE):
                    break
            first = False
            properties.append(self._parse_object_member())
        return ObjectLiteral(properties=properties, line=tok.line, col=tok.col)

    def _parse_object_member(self):
        start = self._peek()
        if self._match(TokenType.ELLIPSIS):
            return SpreadElement(argument=self._parse_maybe_assign(),
                                 line=start.line, col=start.col)

        kind = "init"
        is_async = False
        is_generator = False
        nxt = self._peek(1)
        if (self.options.ecma_version >= 8 and self._is_contextual("async")
                and nxt.type not in _KEY_FOLLOWERS and not nxt.nl_before):
            self._advance()
            is_async = True
            is_generator = self.options.ecma_version >= 9 and bool(self._match(TokenType.STAR))
        elif self._match(TokenType.STAR):
            is_generator = True
        elif (self._is_contextual("get") or self._is_contextual("set")) \
                and nxt.type not in _KEY_FOLLOWERS:
            kind = self._advance().value

        key_tok = self._peek()
        key, computed = self._parse_property_name()

        if kind != "init" or is_async or is_generator or self._check(TokenType.LPAREN):
            value = self._parse_method(is_async=is_async, is_generator=is_generator)
            self._check_accessor_params(kind, value)
            return Property(key=key, value=value, kind=kind, computed=computed,
                            method=kind == "init", line=start.line, col=start.col)

        if self._match(TokenType.COLON):
            value = self._parse_maybe_assign()
            return Property(key=key, value=value, computed=computed,
                            line=start.line, col=start.col)

        if isinstance(key, Identifier) and not computed and key_tok.type == TokenType.NAME:
            # Shorthand `{a}` is a reference, so re-read it as one
            self.pos -= 1
            value = self._parse_ident()
            return Property(key=key, value=value, computed=False, shorthand=True,
                            line=start.line, col=start.col)

        raise self._unexpected()

    def _parse_property_name(self):
        """Parse a property key, returning ``(key, computed)``."""
        tok = self._peek()
        if self._match(TokenType.LBRACKET):
            key = self._parse_maybe_assign()
            self._expect(TokenType.RBRACKET)
            return key, True
        if tok.type == TokenType.NUM:
            self._advance()
            return NumberLiteral(value=number_value(tok.value), raw=tok.value,
                                 line=tok.line, col=tok.col), False
        if tok.type == TokenType.STRING:
            self._advance()
            return StringLiteral(value=tok.value, line=tok.line, col=tok.col), False
        return self._parse_ident(liberal=True), False
