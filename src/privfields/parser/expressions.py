"""Expression parsing: sequence, assignment, conditional, binary and unary."""

from ..ast_nodes import (
    AssignExpr, AwaitExpr, BinaryExpr, Identifier, MemberExpr,
    SequenceExpr, TernaryExpr, UnaryExpr, YieldExpr,
)
from ..tokens import ASSIGN_OPS, TokenType

# Binary operator precedence, loosest first
BINARY_PRECEDENCE: dict[TokenType, int] = {
    TokenType.QUESTION_QUESTION: 1,
    TokenType.PIPE_PIPE: 1,
    TokenType.AMP_AMP: 2,
    TokenType.PIPE: 3,
    TokenType.CARET: 4,
    TokenType.AMP: 5,
    TokenType.EQ_EQ: 6, TokenType.BANG_EQ: 6,
    TokenType.EQ_EQ_EQ: 6, TokenType.BANG_EQ_EQ: 6,
    TokenType.LT: 7, TokenType.GT: 7, TokenType.LT_EQ: 7, TokenType.GT_EQ: 7,
    TokenType.INSTANCEOF: 7, TokenType.IN: 7,
    TokenType.LT_LT: 8, TokenType.GT_GT: 8, TokenType.GT_GT_GT: 8,
    TokenType.PLUS: 9, TokenType.MINUS: 9,
    TokenType.STAR: 10, TokenType.SLASH: 10, TokenType.PERCENT: 10,
    TokenType.STAR_STAR: 11,
}

_PREFIX_OPS = (
    TokenType.DELETE, TokenType.TYPEOF, TokenType.VOID, TokenType.BANG,
    TokenType.TILDE, TokenType.PLUS, TokenType.MINUS,
)


class ExpressionsMixin:

    def _parse_expression(self):
        """Parse a comma-separated expression."""
        expr = self._parse_maybe_assign()
        if not self._check(TokenType.COMMA):
            return expr
        expressions = [expr]
        while self._match(TokenType.COMMA):
            expressions.append(self._parse_maybe_assign())
        return SequenceExpr(expressions=expressions, line=expr.line, col=expr.col)

    def _parse_maybe_assign(self):
        if self.in_generator and self._is_contextual("yield"):
            return self._parse_yield()
        left = self._parse_maybe_conditional()
        if self._peek().type in ASSIGN_OPS:
            self._check_lval(left)
            op_tok = self._advance()
            right = self._parse_maybe_assign()
            return AssignExpr(target=left, op=op_tok.value, value=right,
                              line=left.line, col=left.col)
        return left

    def _parse_maybe_conditional(self):
        expr = self._parse_expr_ops()
        if self._match(TokenType.QUESTION):
            true_expr = self._parse_maybe_assign()
            self._expect(TokenType.COLON)
            false_expr = self._parse_maybe_assign()
            return TernaryExpr(condition=expr, true_expr=true_expr,
                               false_expr=false_expr, line=expr.line, col=expr.col)
        return expr

    def _parse_expr_ops(self):
        left = self._parse_maybe_unary()
        return self._parse_expr_op(left, 0)

    def _parse_expr_op(self, left, min_prec: int):
        """Precedence climbing over BINARY_PRECEDENCE."""
        while True:
            tok = self._peek()
            prec = BINARY_PRECEDENCE.get(tok.type)
            if prec is None or prec <= min_prec:
                return left
            self._advance()
            right = self._parse_maybe_unary()
            # ** is right-associative
            next_min = prec - 1 if tok.type == TokenType.STAR_STAR else prec
            right = self._parse_expr_op(right, next_min)
            left = BinaryExpr(left=left, op=tok.value, right=right,
                              line=left.line, col=left.col)

    def _parse_maybe_unary(self):
        tok = self._peek()

        if self.in_async and self._is_contextual("await"):
            self._advance()
            argument = self._parse_maybe_unary()
            return AwaitExpr(argument=argument, line=tok.line, col=tok.col)
        if tok.type in _PREFIX_OPS:
            self._advance()
            operand = self._parse_maybe_unary()
            if tok.type == TokenType.DELETE and self.strict and isinstance(operand, Identifier):
                raise self._error("Deleting local variable in strict mode", tok)
            return UnaryExpr(op=tok.value, operand=operand, prefix=True,
                             line=tok.line, col=tok.col)
        if tok.type in (TokenType.PLUS_PLUS, TokenType.MINUS_MINUS):
            self._advance()
            operand = self._parse_maybe_unary()
            self._check_lval(operand)
            return UnaryExpr(op=tok.value, operand=operand, prefix=True,
                             line=tok.line, col=tok.col)

        expr = self._parse_expr_subscripts()
        while self._check(TokenType.PLUS_PLUS, TokenType.MINUS_MINUS) \
                and not self._peek().nl_before:
            self._check_lval(expr)
            op = self._advance().value
            expr = UnaryExpr(op=op, operand=expr, prefix=False,
                             line=expr.line, col=expr.col)
        return expr

    def _parse_yield(self) -> YieldExpr:
        tok = self._advance()  # yield
        delegate = False
        argument = None
        nxt = self._peek()
        if not nxt.nl_before and nxt.type not in (
                TokenType.SEMICOLON, TokenType.RPAREN, TokenType.RBRACKET,
                TokenType.RBRACE, TokenType.COMMA, TokenType.COLON, TokenType.EOF):
            delegate = bool(self._match(TokenType.STAR))
            argument = self._parse_maybe_assign()
        return YieldExpr(argument=argument, delegate=delegate,
                         line=tok.line, col=tok.col)

    def _check_lval(self, expr):
        if isinstance(expr, (Identifier, MemberExpr)):
            return
        raise self._error_at("Assigning to rvalue", expr)
