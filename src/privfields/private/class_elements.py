"""Class member parsing for private members and public static fields.

Static members and members whose key is a private name are parsed here;
every other member is handed back to the base grammar unchanged. A member
is read as a head (modifiers, key) and then becomes either a method or a
field depending on what follows the key.
"""

from ..ast_nodes import FieldDecl, MethodDecl, PrivateName
from ..parser.classes import ClassElementHead, key_name
from ..parser.core import StaticPrototypeError
from ..tokens import TokenType
from .errors import ReservedPrivateNameError, StaticConstructorFieldError

_MODIFIER_FOLLOWERS = (TokenType.LPAREN, TokenType.EQ, TokenType.SEMICOLON)


class ClassElementsMixin:

    def _parse_class(self, is_statement: bool):
        with self.private_scope.class_body():
            node = super()._parse_class(is_statement)
        return node

    def _ends_member_name(self) -> bool:
        return self._check(*_MODIFIER_FOLLOWERS)

    def _parse_class_element(self):
        if self._match(TokenType.SEMICOLON):
            return None

        start = self._peek()
        save = self.pos
        head = ClassElementHead(line=start.line, col=start.col)
        head.static = self._try_contextual(head, "static")
        if not head.static:
            self.pos = save
            if not self._is_private_element_start():
                return super()._parse_class_element()
            head = ClassElementHead(line=start.line, col=start.col)

        is_generator = bool(self._match(TokenType.STAR))
        is_async = False
        if not is_generator:
            if self.options.ecma_version >= 8 and self._is_contextual("async"):
                if head.static and self._peek(1).type in (TokenType.SEMICOLON, TokenType.EQ):
                    # `static async = 1` declares a field named async
                    head.key = self._parse_ident(liberal=True)
                    return self._parse_field_rest(head)
                if self._try_contextual(head, "async", no_line_break=True):
                    is_async = True
                    is_generator = (self.options.ecma_version >= 9
                                    and bool(self._match(TokenType.STAR)))
            elif self._try_contextual(head, "get"):
                head.kind = "get"
            elif self._try_contextual(head, "set"):
                head.kind = "set"

        if head.key is None and self._check(TokenType.PRIVATE_NAME):
            self._parse_private_key(head)
            if not self._check(TokenType.LPAREN):
                return self._parse_private_field(head, is_generator, is_async)
        elif head.key is None:
            head.key, head.computed = self._parse_property_name()
            if not head.computed and key_name(head.key) == "prototype":
                raise StaticPrototypeError(
                    "Classes may not have a static property named prototype",
                    head.key.line, head.key.col)

        if head.kind is None:
            head.kind = "method"
        member = self._parse_class_method(head, is_generator, is_async)
        self._check_static_constructor(member)
        if isinstance(member, MethodDecl):
            self._check_accessor_params(member.kind, member.value)
        return member

    def _is_private_element_start(self) -> bool:
        """Lookahead: do optional `*`/`async`/`get`/`set` lead to a `#name` key?"""
        offset = 0
        tok = self._peek()
        nxt = self._peek(1)
        if tok.type == TokenType.STAR:
            offset = 1
        elif tok.type == TokenType.NAME and nxt.type not in _MODIFIER_FOLLOWERS:
            if tok.value == "async" and not nxt.nl_before:
                offset = 2 if nxt.type == TokenType.STAR else 1
            elif tok.value in ("get", "set"):
                offset = 1
        return self._peek(offset).type == TokenType.PRIVATE_NAME

    def _parse_private_key(self, head: ClassElementHead):
        key = self._parse_private_name()
        head.key = key
        head.computed = False
        if head.static and key.name == "constructor":
            raise ReservedPrivateNameError(
                "Classes may not have a private static property named #constructor",
                key.line, key.col)
        kind = head.kind or ("method" if self._check(TokenType.LPAREN) else "field")
        self.private_scope.declare(key.name, kind, head.line, head.col)

    def _parse_private_field(self, head: ClassElementHead, is_generator: bool,
                             is_async: bool) -> FieldDecl:
        if head.kind is not None or is_generator or is_async:
            raise self._unexpected()
        if head.static and head.key.name == "prototype":
            raise ReservedPrivateNameError(
                "Classes may not have a private static field named #prototype",
                head.key.line, head.key.col)
        return self._parse_field_rest(head)

    def _parse_class_method(self, head: ClassElementHead, is_generator: bool,
                            is_async: bool):
        if (is_generator or is_async or head.kind != "method" or not head.static
                or self.options.ecma_version < 8 or self._check(TokenType.LPAREN)):
            with self._scoped(in_private_method=isinstance(head.key, PrivateName)):
                return super()._parse_class_method(head, is_generator, is_async)
        return self._parse_field_rest(head)

    def _parse_field_rest(self, head: ClassElementHead) -> FieldDecl:
        value = None
        if self._match(TokenType.EQ):
            with self._scoped(in_static_field_value=head.static):
                value = self._parse_maybe_assign()
        self._semicolon()
        return FieldDecl(key=head.key, value=value, static=head.static,
                         computed=head.computed, line=head.line, col=head.col)

    def _check_static_constructor(self, member):
        if not member.static or member.computed:
            return
        if isinstance(member, MethodDecl) and member.kind in ("get", "set"):
            return
        if key_name(member.key) == "constructor":
            raise StaticConstructorFieldError(
                "Classes may not have a static field named constructor",
                member.key.line, member.key.col)
