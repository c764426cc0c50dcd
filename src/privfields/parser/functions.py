"""Function declarations, function expressions, methods, and arrow functions."""

from ..tokens import TokenType
from ..ast_nodes import (
    ArrowFunctionExpr, FunctionDecl, FunctionExpr, Identifier, Param,
)


class FunctionsMixin:

    def _parse_function(self, is_statement: bool, is_async: bool = False):
        """Parse `function [*] [name] (params) { body }`.

        The `async` word, if any, has already been consumed by the caller.
        """
        tok = self._expect(TokenType.FUNCTION)
        is_generator = bool(self._match(TokenType.STAR))
        if is_generator and self.options.ecma_version < 6:
            raise self._error("Generators are not supported before ES6", tok)
        if is_async and is_generator and self.options.ecma_version < 9:
            raise self._error("Async generators are not supported before ES2018", tok)

        name = None
        if self._check(TokenType.NAME) or (is_statement and self._is_word(self._peek())):
            name = self._parse_ident()
        elif is_statement:
            raise self._error("A function name is required")

        params, body = self._parse_function_rest(is_async, is_generator)
        node_type = FunctionDecl if is_statement else FunctionExpr
        return node_type(name=name, params=params, body=body, is_async=is_async,
                         is_generator=is_generator, line=tok.line, col=tok.col)

    def _parse_method(self, is_async: bool = False, is_generator: bool = False) -> FunctionExpr:
        tok = self._peek()
        params, body = self._parse_function_rest(is_async, is_generator)
        return FunctionExpr(params=params, body=body, is_async=is_async,
                            is_generator=is_generator, line=tok.line, col=tok.col)

    def _parse_function_rest(self, is_async: bool, is_generator: bool):
        """Parse the parameter list and block body of a non-arrow function."""
        with self._scoped(in_function=True, in_async=is_async,
                          in_generator=is_generator):
            params = self._parse_params()
            body = self._parse_block()
        return params, body

    def _parse_params(self) -> list[Param]:
        self._expect(TokenType.LPAREN)
        params = []
        while not self._match(TokenType.RPAREN):
            tok = self._peek()
            if self._match(TokenType.ELLIPSIS):
                name = self._parse_ident()
                params.append(Param(name=name, rest=True, line=tok.line, col=tok.col))
                self._expect(TokenType.RPAREN, "')' after rest parameter")
                break
            name = self._parse_ident()
            default = None
            if self._match(TokenType.EQ):
                default = self._parse_maybe_assign()
            params.append(Param(name=name, default=default, line=tok.line, col=tok.col))
            if not self._check(TokenType.RPAREN):
                self._expect(TokenType.COMMA)
        return params

    # ---- Arrow functions ----

    def _is_arrow_params(self) -> bool:
        """Check if '(' starts an arrow function parameter list: (...) =>"""
        save = self.pos
        depth = 0
        while True:
            tok = self._advance()
            if tok.type == TokenType.EOF:
                break
            if tok.type in (TokenType.LPAREN, TokenType.LBRACKET, TokenType.LBRACE):
                depth += 1
            elif tok.type in (TokenType.RPAREN, TokenType.RBRACKET, TokenType.RBRACE):
                depth -= 1
                if depth == 0:
                    break
        nxt = self._peek()
        self.pos = save
        return nxt.type == TokenType.FAT_ARROW and not nxt.nl_before

    def _param_from_ident(self, ident: Identifier) -> Param:
        return Param(name=ident, line=ident.line, col=ident.col)

    def _parse_arrow(self, params: list[Param], tok) -> ArrowFunctionExpr:
        self._expect(TokenType.FAT_ARROW)
        with self._scoped(in_function=True, in_generator=False):
            if self._check(TokenType.LBRACE):
                body = self._parse_block()
                expression = False
            else:
                body = self._parse_maybe_assign()
                expression = True
        return ArrowFunctionExpr(params=params, body=body, expression=expression,
                                 line=tok.line, col=tok.col)
