"""Member access, calls, and `new` expressions."""

from ..tokens import TokenType
from ..ast_nodes import (
    ArrowFunctionExpr, CallExpr, MemberExpr, NewExpr, SpreadElement,
)


class PostfixMixin:

    def _parse_expr_subscripts(self):
        expr = self._parse_expr_atom()
        # `() => x.y` already consumed its own subscripts
        if isinstance(expr, ArrowFunctionExpr):
            return expr
        return self._parse_subscripts(expr)

    def _parse_subscripts(self, base, no_calls: bool = False):
        while True:
            tok = self._peek()

            if tok.type == TokenType.DOT:
                self._advance()
                prop = self._parse_dot_property()
                base = MemberExpr(obj=base, prop=prop, computed=False,
                                  line=base.line, col=base.col)

            elif tok.type == TokenType.LBRACKET:
                self._advance()
                prop = self._parse_expression()
                self._expect(TokenType.RBRACKET)
                base = MemberExpr(obj=base, prop=prop, computed=True,
                                  line=base.line, col=base.col)

            elif tok.type == TokenType.LPAREN and not no_calls:
                self._advance()
                args = self._parse_expr_list(TokenType.RPAREN)
                base = CallExpr(callee=base, args=args,
                                line=base.line, col=base.col)

            else:
                return base

    def _parse_dot_property(self):
        """Parse the name after `.` in a member expression."""
        return self._parse_ident(liberal=True)

    def _parse_expr_list(self, close: TokenType, allow_holes: bool = False) -> list:
        """Parse comma-separated elements up to ``close``, consuming it."""
        elements = []
        first = True
        while not self._match(close):
            if not first:
                self._expect(TokenType.COMMA)
                if self._match(close):
                    break
            first = False
            if allow_holes and self._check(TokenType.COMMA):
                elements.append(None)
                continue
            tok = self._peek()
            if self._match(TokenType.ELLIPSIS):
                elements.append(SpreadElement(argument=self._parse_maybe_assign(),
                                              line=tok.line, col=tok.col))
            else:
                elements.append(self._parse_maybe_assign())
        return elements

    def _parse_new(self) -> NewExpr:
        tok = self._expect(TokenType.NEW)
        if self._check(TokenType.DOT):
            raise self._error("'new.target' is not supported")
        callee = self._parse_subscripts(self._parse_expr_atom(), no_calls=True)
        args = []
        if self._match(TokenType.LPAREN):
            args = self._parse_expr_list(TokenType.RPAREN)
        return NewExpr(callee=callee, args=args, line=tok.line, col=tok.col)
