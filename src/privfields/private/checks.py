"""Context-sensitive restrictions inside class bodies.

`delete` may not target a private member, and static field initializers may
refer to neither `arguments` nor `super`. A direct `super()` call is never
valid inside a private method, since a private method cannot be the
constructor.
"""

from ..ast_nodes import MemberExpr, PrivateName, SuperExpr, UnaryExpr
from ..tokens import TokenType
from .errors import (
    InvalidArgumentsInFieldInitError, InvalidDeletePrivateError,
    InvalidDirectSuperCallError, InvalidSuperInFieldInitError,
)


class ContextualChecksMixin:

    def _parse_maybe_unary(self):
        expr = super()._parse_maybe_unary()
        if (isinstance(expr, UnaryExpr) and expr.op == "delete"
                and isinstance(expr.operand, MemberExpr)
                and isinstance(expr.operand.prop, PrivateName)):
            raise InvalidDeletePrivateError("Private elements may not be deleted",
                                            expr.line, expr.col)
        return expr

    def _parse_ident(self, liberal: bool = False):
        ident = super()._parse_ident(liberal)
        if self.in_static_field_value and not liberal and ident.name == "arguments":
            raise InvalidArgumentsInFieldInitError(
                "A static class field initializer may not contain arguments",
                ident.line, ident.col)
        return ident

    def _parse_expr_atom(self):
        atom = super()._parse_expr_atom()
        if isinstance(atom, SuperExpr):
            if self.in_static_field_value:
                raise InvalidSuperInFieldInitError(
                    "A static class field initializer may not contain super",
                    atom.line, atom.col)
            if self.in_private_method and self._check(TokenType.LPAREN):
                raise InvalidDirectSuperCallError(
                    "A class method that is not a constructor may not contain a direct super",
                    atom.line, atom.col)
        return atom

    def _parse_function_rest(self, is_async: bool, is_generator: bool):
        # A non-arrow function starts a fresh `arguments` and `super` binding
        with self._scoped(in_static_field_value=False):
            return super()._parse_function_rest(is_async, is_generator)
