"""`obj.#name` member access."""

from ..ast_nodes import PrivateName
from ..tokens import TokenType


class MemberAccessMixin:

    def _parse_dot_property(self):
        if self._check(TokenType.PRIVATE_NAME):
            prop = self._parse_private_name()
            self.private_scope.use(prop.name, prop.line, prop.col)
            return prop
        return super()._parse_dot_property()

    def _parse_private_name(self) -> PrivateName:
        tok = self._expect(TokenType.PRIVATE_NAME)
        if not tok.value:
            raise self._error("Expected identifier after '#'", tok)
        node = PrivateName(name=tok.value, line=tok.line, col=tok.col)
        if self.options.allow_reserved == "never":
            self._check_unreserved(node.name, node.line, node.col)
        return node
