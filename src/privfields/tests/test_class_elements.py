"""Tests for private members and static fields in class bodies."""

import pytest
from privfields import ParseError, parse, parse_with_diagnostics
from privfields.ast_nodes import (
    ClassDecl, FieldDecl, Identifier, MemberExpr, MethodDecl, NumberLiteral,
    PrivateName, SequenceExpr, ThisExpr, walk,
)
from privfields.parser import GetterParamsError, SetterArityError, SetterRestParamError
from privfields.private import (
    DuplicatePrivateElementError, ReservedPrivateNameError,
    StaticConstructorFieldError, UndeclaredPrivateNameError,
)
from privfields.parser import StaticPrototypeError


def parse_class(source: str, **options) -> ClassDecl:
    prog = parse(source, **options)
    cls = prog.body[0]
    assert isinstance(cls, ClassDecl)
    return cls


COUNTER = """
class Counter {
  #count = 0;
  inc() {
    this.#count++;
    return this.#count;
  }
}
"""


# --- End to end ---

class TestCounterSample:
    def test_members(self):
        prog, diagnostics = parse_with_diagnostics(COUNTER)
        assert diagnostics == []
        field, method = prog.body[0].members
        assert isinstance(field, FieldDecl)
        assert field.static is False
        assert field.computed is False
        assert isinstance(field.key, PrivateName)
        assert field.key.name == "count"
        assert isinstance(field.value, NumberLiteral)
        assert field.value.value == 0
        assert isinstance(method, MethodDecl)
        assert method.kind == "method"

    def test_private_accesses_in_method(self):
        method = parse_class(COUNTER).members[1]
        accesses = [n for n in walk(method.value.body) if isinstance(n, MemberExpr)]
        assert len(accesses) == 2
        for access in accesses:
            assert isinstance(access.obj, ThisExpr)
            assert isinstance(access.prop, PrivateName)
            assert access.prop.name == "count"
            assert access.computed is False

    def test_positions(self):
        field = parse_class(COUNTER).members[0]
        assert (field.line, field.col) == (3, 3)
        assert (field.key.line, field.key.col) == (3, 3)


# --- Private fields and methods ---

class TestPrivateMembers:
    def test_field_without_initializer(self):
        field = parse_class("class A { #x; }").members[0]
        assert isinstance(field, FieldDecl)
        assert field.value is None

    def test_fields_separated_by_newline(self):
        members = parse_class("class A {\n  #a = 1\n  #b = 2\n}").members
        assert [m.key.name for m in members] == ["a", "b"]

    def test_fields_on_one_line_need_semicolon(self):
        with pytest.raises(ParseError):
            parse("class A { #a = 1 #b = 2 }")

    def test_private_method(self):
        m = parse_class("class A { #m() { return 1; } }").members[0]
        assert isinstance(m, MethodDecl)
        assert isinstance(m.key, PrivateName)
        assert m.kind == "method"

    def test_private_accessors_compose(self):
        members = parse_class(
            "class A { get #x() { return 1 } set #x(v) {} }").members
        assert [m.kind for m in members] == ["get", "set"]

    def test_private_async_and_generator_methods(self):
        a, g = parse_class("class A { async #a() {} *#g() {} }").members
        assert a.value.is_async is True
        assert g.value.is_generator is True

    def test_static_private_field_and_method(self):
        f, m = parse_class("class A { static #f = 1; static #m() {} }").members
        assert isinstance(f, FieldDecl) and f.static is True
        assert isinstance(m, MethodDecl) and m.static is True

    def test_use_before_declaration(self):
        parse("class A { m() { return this.#x } #x = 1 }")

    def test_nested_class_sees_outer_name(self):
        parse("class Outer { #secret = 1; m() { return class { read(o) { return o.#secret } } } }")

    def test_nested_use_declared_later_in_outer(self):
        parse("class Outer { m() { return class { read(o) { return o.#late } } } #late; }")

    def test_generator_field_rejected(self):
        with pytest.raises(ParseError):
            parse("class A { *#x; }")

    def test_accessor_field_rejected(self):
        with pytest.raises(ParseError):
            parse("class A { get #x; }")

    def test_empty_private_name(self):
        with pytest.raises(ParseError, match="Expected identifier after '#'"):
            parse("class A { # = 1; }")

    def test_reserved_private_name_when_never(self):
        parse("class A { #if = 1; }")
        with pytest.raises(ParseError, match="Unexpected keyword 'if'"):
            parse("class A { #if = 1; }", allow_reserved="never")


# --- Duplicate and undeclared names ---

class TestPrivateNameErrors:
    def test_duplicate_fields(self):
        with pytest.raises(DuplicatePrivateElementError):
            parse("class A { #a; #a; }")

    def test_field_then_accessor(self):
        with pytest.raises(DuplicatePrivateElementError):
            parse("class A { #a; get #a() { return 1 } }")

    def test_accessor_then_field(self):
        with pytest.raises(DuplicatePrivateElementError):
            parse("class A { set #a(v) {} #a; }")

    def test_duplicate_position_is_member_start(self):
        with pytest.raises(DuplicatePrivateElementError) as exc:
            parse("class A {\n  #a;\n  static #a;\n}")
        assert (exc.value.line, exc.value.col) == (3, 3)

    def test_undeclared(self):
        with pytest.raises(UndeclaredPrivateNameError) as exc:
            parse("class A { m() { return this.#x; } }")
        assert (exc.value.line, exc.value.col) == (1, 29)

    def test_undeclared_reports_earliest_use(self):
        source = "class A {\n  m() {\n    this.#b;\n    this.#a;\n    this.#b;\n  }\n}"
        with pytest.raises(UndeclaredPrivateNameError, match="#b") as exc:
            parse(source)
        assert (exc.value.line, exc.value.col) == (3, 10)

    def test_undeclared_in_nested_class_reported_by_outer(self):
        with pytest.raises(UndeclaredPrivateNameError):
            parse("class Outer { m() { return class { read(o) { return o.#nope } } } }")

    def test_inner_declaration_not_visible_to_outer(self):
        with pytest.raises(UndeclaredPrivateNameError):
            parse("class Outer { m(o) { class Inner { #x; } return o.#x; } }")

    def test_private_access_outside_class(self):
        with pytest.raises(UndeclaredPrivateNameError):
            parse("this.#x;")

    def test_private_name_not_an_expression(self):
        with pytest.raises(ParseError, match="Unexpected token '#x'"):
            parse("class A { #x; m() { return #x; } }")

    def test_computed_private_access_rejected(self):
        with pytest.raises(ParseError):
            parse("class A { #x; m() { return this[#x]; } }")


# --- Reserved names ---

class TestReservedNames:
    def test_static_private_constructor(self):
        with pytest.raises(ReservedPrivateNameError) as exc:
            parse("class A { static #constructor = 1; }")
        assert (exc.value.line, exc.value.col) == (1, 18)

    def test_instance_private_constructor_allowed(self):
        member = parse_class("class A { #constructor = 1; }").members[0]
        assert member.key.name == "constructor"

    def test_static_private_prototype_field(self):
        with pytest.raises(ReservedPrivateNameError):
            parse("class A { static #prototype = 1; }")

    def test_static_private_prototype_method_allowed(self):
        member = parse_class("class A { static #prototype() {} }").members[0]
        assert isinstance(member, MethodDecl)

    def test_static_prototype_field(self):
        with pytest.raises(StaticPrototypeError):
            parse("class A { static prototype = 1; }")

    def test_static_prototype_string_key(self):
        with pytest.raises(StaticPrototypeError):
            parse("class A { static 'prototype' = 1; }")

    def test_static_computed_prototype_allowed(self):
        parse("class A { static ['prototype'] = 1; }")

    def test_static_constructor_field(self):
        with pytest.raises(StaticConstructorFieldError):
            parse("class A { static constructor = 1; }")

    def test_static_constructor_method(self):
        with pytest.raises(StaticConstructorFieldError):
            parse("class A { static constructor() {} }")

    def test_static_constructor_accessor_allowed(self):
        member = parse_class("class A { static get constructor() { return 1 } }").members[0]
        assert member.kind == "get"


# --- Public static fields ---

class TestStaticFields:
    def test_static_field(self):
        f = parse_class("class A { static x = 1; }").members[0]
        assert isinstance(f, FieldDecl)
        assert f.static is True
        assert isinstance(f.key, Identifier)
        assert f.key.name == "x"

    def test_static_field_without_initializer(self):
        f = parse_class("class A { static x; }").members[0]
        assert isinstance(f, FieldDecl)
        assert f.value is None

    def test_field_initializer_is_single_assignment(self):
        with pytest.raises(ParseError, match="Unexpected token ','"):
            parse("class A { static x = 1, 2; }")
        with pytest.raises(ParseError, match="Unexpected token ','"):
            parse("class A { #x = 1, 2; }")

    def test_parenthesized_sequence_initializer(self):
        f = parse_class("class A { static x = (1, 2); }").members[0]
        assert isinstance(f, FieldDecl)
        assert isinstance(f.value, SequenceExpr)
        assert len(f.value.expressions) == 2

    def test_static_field_asi(self):
        members = parse_class("class A {\n  static x = 1\n  m() {}\n}").members
        assert isinstance(members[0], FieldDecl)
        assert isinstance(members[1], MethodDecl)

    def test_static_computed_field(self):
        f = parse_class("class A { static [k] = 1; }").members[0]
        assert isinstance(f, FieldDecl)
        assert f.computed is True

    def test_static_method_still_a_method(self):
        m = parse_class("class A { static m() {} }").members[0]
        assert isinstance(m, MethodDecl)
        assert m.static is True

    def test_static_async_field(self):
        a, b = parse_class("class A { static async = 1; static async; }").members
        assert isinstance(a, FieldDecl) and a.key.name == "async"
        assert isinstance(b, FieldDecl) and b.value is None

    def test_static_async_method(self):
        m = parse_class("class A { static async m() {} }").members[0]
        assert isinstance(m, MethodDecl)
        assert m.value.is_async is True

    def test_static_async_line_break_is_field(self):
        a, b = parse_class("class A { static async\n m() {} }").members
        assert isinstance(a, FieldDecl) and a.key.name == "async"
        assert isinstance(b, MethodDecl) and b.static is False

    def test_modifier_words_as_static_names(self):
        members = parse_class("class A { static get() {} static set = 1; static static; }").members
        assert isinstance(members[0], MethodDecl) and members[0].key.name == "get"
        assert isinstance(members[1], FieldDecl) and members[1].key.name == "set"
        assert isinstance(members[2], FieldDecl) and members[2].key.name == "static"

    def test_static_fields_need_es2017(self):
        with pytest.raises(ParseError, match="Unexpected token '='"):
            parse("class A { static x = 1; }", ecma_version=2016)

    def test_private_fields_allowed_before_es2017(self):
        parse("class A { #x = 1; static #y = 2; }", ecma_version=2015)

    def test_public_instance_field_not_supported(self):
        with pytest.raises(ParseError):
            parse("class A { x = 1; }")


# --- Accessor arity on private accessors ---

class TestPrivateAccessorArity:
    def test_private_getter_with_params(self):
        _, diagnostics = parse_with_diagnostics("class A { get #x(a) { return a } }")
        assert [type(d) for d in diagnostics] == [GetterParamsError]

    def test_private_setter_arity(self):
        _, diagnostics = parse_with_diagnostics("class A { set #x() {} }")
        assert [type(d) for d in diagnostics] == [SetterArityError]

    def test_static_setter_rest_param(self):
        prog, diagnostics = parse_with_diagnostics("class A { static set x(...v) {} }")
        assert [type(d) for d in diagnostics] == [SetterRestParamError]
        assert len(prog.body[0].members) == 1

    def test_parsing_continues_after_recoverable(self):
        prog, diagnostics = parse_with_diagnostics(
            "class A { get #x(a) { return a } #y = 1; }")
        assert len(diagnostics) == 1
        assert len(prog.body[0].members) == 2
