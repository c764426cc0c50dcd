"""AST node definitions for the privfields JavaScript grammar.

Node shapes follow the usual JavaScript syntax tree layout (a class body is
a flat member list, member access carries a ``computed`` flag), plus the two
node kinds private class elements introduce: ``PrivateName`` and
``FieldDecl``.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Optional, Union



@dataclass
class Program:
    body: list[stmt] = field(default_factory=list)
    source_type: str = "script"

# --- Declarations ---

@dataclass
class FunctionDecl:
    name: Optional[Identifier] = None
    params: list[Param] = field(default_factory=list)
    body: Optional[Block] = None
    is_async: bool = False
    is_generator: bool = False
    line: int = 0
    col: int = 0

@dataclass
class ClassDecl:
    name: Optional[Identifier] = None
    superclass: Optional[expr] = None
    members: list[class_member] = field(default_factory=list)
    is_expression: bool = False
    line: int = 0
    col: int = 0

@dataclass
class MethodDecl:
    key: Optional[property_key] = None
    value: Optional[FunctionExpr] = None
    kind: str = "method"  # method | constructor | get | set
    static: bool = False
    computed: bool = False
    line: int = 0
    col: int = 0

@dataclass
class FieldDecl:
    key: Optional[property_key] = None
    value: Optional[expr] = None
    static: bool = False
    computed: bool = False
    line: int = 0
    col: int = 0

@dataclass
class Param:
    name: Optional[Identifier] = None
    default: Optional[expr] = None
    rest: bool = False
    line: int = 0
    col: int = 0

@dataclass
class VarDeclarator:
    name: Optional[Identifier] = None
    init: Optional[expr] = None
    line: int = 0
    col: int = 0

# --- Statements ---

@dataclass
class Block:
    statements: list[stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class VarDeclStmt:
    kind: str = "var"  # var | let | const
    declarations: list[VarDeclarator] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class ReturnStmt:
    value: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class IfStmt:
    condition: Optional[expr] = None
    then_block: Optional[stmt] = None
    else_block: Optional[stmt] = None
    line: int = 0
    col: int = 0

@dataclass
class WhileStmt:
    condition: Optional[expr] = None
    body: Optional[stmt] = None
    line: int = 0
    col: int = 0

@dataclass
class DoWhileStmt:
    body: Optional[stmt] = None
    condition: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class ForStmt:
    init: Optional[Union[VarDeclStmt, expr]] = None
    condition: Optional[expr] = None
    update: Optional[expr] = None
    body: Optional[stmt] = None
    line: int = 0
    col: int = 0

@dataclass
class ForInStmt:
    left: Optional[Union[VarDeclStmt, Identifier]] = None
    right: Optional[expr] = None
    body: Optional[stmt] = None
    of: bool = False
    line: int = 0
    col: int = 0

@dataclass
class BreakStmt:
    line: int = 0
    col: int = 0

@dataclass
class ContinueStmt:
    line: int = 0
    col: int = 0

@dataclass
class ThrowStmt:
    expr: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class TryCatchStmt:
    try_block: Optional[Block] = None
    catch_param: Optional[Identifier] = None
    catch_block: Optional[Block] = None
    finally_block: Optional[Block] = None
    line: int = 0
    col: int = 0

@dataclass
class SwitchCase:
    test: Optional[expr] = None  # None for `default:`
    body: list[stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class SwitchStmt:
    discriminant: Optional[expr] = None
    cases: list[SwitchCase] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class ExprStmt:
    expr: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class EmptyStmt:
    line: int = 0
    col: int = 0

@dataclass
class DebuggerStmt:
    line: int = 0
    col: int = 0

# --- Expressions ---

@dataclass
class Identifier:
    name: str = ""
    line: int = 0
    col: int = 0

@dataclass
class PrivateName:
    name: str = ""
    line: int = 0
    col: int = 0

@dataclass
class NumberLiteral:
    value: Union[int, float] = 0
    raw: str = ""
    line: int = 0
    col: int = 0

@dataclass
class StringLiteral:
    value: str = ""
    line: int = 0
    col: int = 0

@dataclass
class BoolLiteral:
    value: bool = False
    line: int = 0
    col: int = 0

@dataclass
class NullLiteral:
    line: int = 0
    col: int = 0

@dataclass
class ThisExpr:
    line: int = 0
    col: int = 0

@dataclass
class SuperExpr:
    line: int = 0
    col: int = 0

@dataclass
class ArrayLiteral:
    elements: list[expr] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class SpreadElement:
    argument: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class Property:
    key: Optional[property_key] = None
    value: Optional[expr] = None
    kind: str = "init"  # init | get | set
    computed: bool = False
    shorthand: bool = False
    method: bool = False
    line: int = 0
    col: int = 0

@dataclass
class ObjectLiteral:
    properties: list[Union[Property, SpreadElement]] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class FunctionExpr:
    name: Optional[Identifier] = None
    params: list[Param] = field(default_factory=list)
    body: Optional[Block] = None
    is_async: bool = False
    is_generator: bool = False
    line: int = 0
    col: int = 0

@dataclass
class ArrowFunctionExpr:
    params: list[Param] = field(default_factory=list)
    body: Optional[Union[Block, expr]] = None
    expression: bool = False
    line: int = 0
    col: int = 0

@dataclass
class MemberExpr:
    obj: Optional[expr] = None
    prop: Optional[Union[Identifier, PrivateName, expr]] = None
    computed: bool = False
    line: int = 0
    col: int = 0

@dataclass
class CallExpr:
    callee: Optional[expr] = None
    args: list[expr] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class NewExpr:
    callee: Optional[expr] = None
    args: list[expr] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class UnaryExpr:
    op: str = ""
    operand: Optional[expr] = None
    prefix: bool = True
    line: int = 0
    col: int = 0

@dataclass
class BinaryExpr:
    left: Optional[expr] = None
    op: str = ""
    right: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class AssignExpr:
    target: Optional[expr] = None
    op: str = "="
    value: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class TernaryExpr:
    condition: Optional[expr] = None
    true_expr: Optional[expr] = None
    false_expr: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class SequenceExpr:
    expressions: list[expr] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class AwaitExpr:
    argument: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class YieldExpr:
    argument: Optional[expr] = None
    delegate: bool = False
    line: int = 0
    col: int = 0


# --- Sum type aliases ---

class_member = Union[MethodDecl, FieldDecl]
stmt = Union[FunctionDecl, ClassDecl, Block, VarDeclStmt, ReturnStmt, IfStmt,
             WhileStmt, DoWhileStmt, ForStmt, ForInStmt, BreakStmt, ContinueStmt,
             ThrowStmt, TryCatchStmt, SwitchStmt, ExprStmt, EmptyStmt, DebuggerStmt]
expr = Union[Identifier, NumberLiteral, StringLiteral, BoolLiteral, NullLiteral,
             ThisExpr, SuperExpr, ArrayLiteral, ObjectLiteral, FunctionExpr,
             ArrowFunctionExpr, ClassDecl, MemberExpr, CallExpr, NewExpr,
             UnaryExpr, BinaryExpr, AssignExpr, TernaryExpr, SequenceExpr,
             AwaitExpr, YieldExpr, SpreadElement]
property_key = Union[Identifier, PrivateName, StringLiteral, NumberLiteral, expr]


def iter_child_nodes(node):
    """Yield the direct child nodes of ``node`` in field order."""
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, list):
            for item in value:
                if _is_node(item):
                    yield item
        elif _is_node(value):
            yield value


def walk(node):
    """Yield ``node`` and all of its descendants, depth first."""
    yield node
    for child in iter_child_nodes(node):
        yield from walk(child)


def _is_node(value) -> bool:
    return hasattr(value, "__dataclass_fields__")
