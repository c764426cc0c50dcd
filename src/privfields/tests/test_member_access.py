"""Tests for `obj.#name` member access."""

import pytest
from privfields import ParseError, parse
from privfields.ast_nodes import CallExpr, ExprStmt, Identifier, MemberExpr, PrivateName, walk


def private_accesses(prog) -> list[MemberExpr]:
    return [n for n in walk(prog)
            if isinstance(n, MemberExpr) and isinstance(n.prop, PrivateName)]


class TestPrivateAccess:
    def test_access_on_other_instance(self):
        prog = parse("class P { #x; equals(o) { return this.#x === o.#x; } }")
        objs = [a.obj for a in private_accesses(prog)]
        assert len(objs) == 2
        assert isinstance(objs[1], Identifier) and objs[1].name == "o"

    def test_private_method_call(self):
        prog = parse("class A { #m() {} run() { this.#m(); } }")
        run = prog.body[0].members[1]
        stmt = run.value.body.statements[0]
        assert isinstance(stmt, ExprStmt)
        assert isinstance(stmt.expr, CallExpr)
        assert isinstance(stmt.expr.callee.prop, PrivateName)

    def test_chained_access(self):
        prog = parse("class A { #next; last() { return this.#next.#next.value; } }")
        assert len(private_accesses(prog)) == 2

    def test_access_position(self):
        prog = parse("class A { #x; m() { this.#x; } }")
        access = private_accesses(prog)[0]
        assert (access.prop.line, access.prop.col) == (1, 26)
        assert access.computed is False

    def test_private_assignment_target(self):
        parse("class A { #x; set(v) { this.#x = v; this.#x += 1; } }")

    def test_public_name_with_same_spelling_is_separate(self):
        prog = parse("class A { #x = 1; m() { return this.#x + this.x; } }")
        assert len(private_accesses(prog)) == 1
        public = [n for n in walk(prog)
                  if isinstance(n, MemberExpr) and not isinstance(n.prop, PrivateName)]
        assert len(public) == 1
        assert isinstance(public[0].prop, Identifier)
        assert public[0].prop.name == "x"

    def test_keyword_property_after_dot_still_works(self):
        parse("class A { m() { return this.class; } }")

    def test_access_in_static_field_initializer(self):
        parse("class A { static #count = 0; static next = A.#count + 1; }")

    def test_access_in_nested_arrow(self):
        parse("class A { #x = 1; m() { return () => this.#x; } }")

    def test_hash_after_dot_in_base_parser_position(self):
        with pytest.raises(ParseError):
            parse("class A { #x; m() { return this.#; } }")
