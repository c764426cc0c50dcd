"""Class declaration and class member parsing."""

from dataclasses import dataclass
from typing import Optional

from ..tokens import TokenType
from ..ast_nodes import (
    ClassDecl, Identifier, MethodDecl, StringLiteral, property_key,
)
from .core import (
    GetterParamsError, ParseError, SetterArityError, SetterRestParamError,
    StaticPrototypeError,
)


@dataclass
class ClassElementHead:
    """Modifiers and key of a class member, filled in while it is parsed."""
    key: Optional[property_key] = None
    computed: bool = False
    static: bool = False
    kind: Optional[str] = None  # get | set | method | constructor
    line: int = 0
    col: int = 0


def key_name(key) -> Optional[str]:
    """Static name of a non-computed key, or None."""
    if isinstance(key, Identifier):
        return key.name
    if isinstance(key, StringLiteral):
        return key.value
    return None


class ClassesMixin:

    def _parse_class(self, is_statement: bool) -> ClassDecl:
        tok = self._expect(TokenType.CLASS)
        # Class bodies are always strict
        with self._scoped(strict=True):
            name = None
            if self._check(TokenType.NAME):
                name = self._parse_ident()
            elif is_statement:
                raise self._error("A class name is required")
            superclass = None
            if self._match(TokenType.EXTENDS):
                superclass = self._parse_expr_subscripts()
            members = self._parse_class_body()
        return ClassDecl(name=name, superclass=superclass, members=members,
                         is_expression=not is_statement, line=tok.line, col=tok.col)

    def _parse_class_body(self) -> list:
        self._expect(TokenType.LBRACE)
        members = []
        had_constructor = False
        while not self._match(TokenType.RBRACE):
            if self._at_end():
                raise self._unexpected()
            member = self._parse_class_element()
            if member is None:
                continue
            if isinstance(member, MethodDecl) and member.kind == "constructor":
                if had_constructor:
                    raise ParseError("Duplicate constructor in the same class",
                                     member.line, member.col)
                had_constructor = True
            members.append(member)
        return members

    def _parse_class_element(self):
        """Parse one class member; returns None for a stray `;`."""
        if self._match(TokenType.SEMICOLON):
            return None
        start = self._peek()
        head = ClassElementHead(line=start.line, col=start.col)
        head.static = self._try_contextual(head, "static")
        is_generator = bool(self._match(TokenType.STAR))
        is_async = False
        if not is_generator:
            if self.options.ecma_version >= 8 and self._try_contextual(head, "async", no_line_break=True):
                is_async = True
                is_generator = self.options.ecma_version >= 9 and bool(self._match(TokenType.STAR))
            elif self._try_contextual(head, "get"):
                head.kind = "get"
            elif self._try_contextual(head, "set"):
                head.kind = "set"
        if head.key is None:
            head.key, head.computed = self._parse_property_name()
        if head.kind is None:
            head.kind = "method"

        name = None if head.computed else key_name(head.key)
        if not head.static and name == "constructor":
            if head.kind != "method":
                raise self._error_at("Constructor can't have get/set modifier", head.key)
            if is_generator:
                raise self._error_at("Constructor can't be a generator", head.key)
            if is_async:
                raise self._error_at("Constructor can't be an async method", head.key)
            head.kind = "constructor"
        elif head.static and name == "prototype":
            raise StaticPrototypeError("Classes may not have a static property named prototype",
                                       head.key.line, head.key.col)

        member = self._parse_class_method(head, is_generator, is_async)
        if isinstance(member, MethodDecl):
            self._check_accessor_params(member.kind, member.value)
        return member

    def _try_contextual(self, head: ClassElementHead, word: str,
                        no_line_break: bool = False) -> bool:
        """Consume ``word`` as a modifier.

        Returns False when the word is absent, or when it turns out to be the
        member's own name; in the latter case it is stored as the head's key.
        """
        tok = self._peek()
        if not self._eat_contextual(word):
            return False
        if not self._ends_member_name() and not (no_line_break and self._can_insert_semicolon()):
            return True
        if head.key is not None:
            raise self._unexpected()
        head.key = Identifier(name=word, line=tok.line, col=tok.col)
        head.computed = False
        return False

    def _ends_member_name(self) -> bool:
        """Whether the current token follows a complete member name."""
        return self._check(TokenType.LPAREN)

    def _parse_class_method(self, head: ClassElementHead, is_generator: bool,
                            is_async: bool) -> MethodDecl:
        value = self._parse_method(is_async=is_async, is_generator=is_generator)
        return MethodDecl(key=head.key, value=value, kind=head.kind,
                          static=head.static, computed=head.computed,
                          line=head.line, col=head.col)

    def _check_accessor_params(self, kind: str, func):
        """Record arity problems on getters and setters as recoverable errors."""
        params = func.params
        if kind == "get" and params:
            self._raise_recoverable(GetterParamsError(
                "getter should have no params", func.line, func.col))
        elif kind == "set":
            if len(params) != 1:
                self._raise_recoverable(SetterArityError(
                    "setter should have exactly one param", func.line, func.col))
            if params and params[0].rest:
                self._raise_recoverable(SetterRestParamError(
                    "Setter cannot use rest params", params[0].line, params[0].col))
