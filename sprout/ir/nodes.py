"""Generic IR produced by the grower and consumed by the emitter.

A closed set of node types. Expression-shaped nodes can appear anywhere a
value is expected; statement-shaped ones (VariableDecl, ExpressionStatement,
Return, Block) are what a function body or a top-level unit is made of.
VariableDecl and Assignment are also accepted in expression position by the
emitter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Optional


@dataclass(frozen=True)
class Node:
    is_expression: ClassVar[bool] = True

    def children(self) -> Iterator["Node"]:
        return iter(())


@dataclass(frozen=True)
class Literal(Node):
    """Host constant or quoted data (Symbols, Keywords and lists allowed)."""
    value: Any


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class UnaryOp(Node):
    op: str
    operand: Node

    def children(self):
        yield self.operand


@dataclass(frozen=True)
class BinaryOp(Node):
    op: str
    left: Node
    right: Node

    def children(self):
        yield self.left
        yield self.right


@dataclass(frozen=True)
class ArrayLiteral(Node):
    elements: list[Node] = field(default_factory=list)

    def children(self):
        yield from self.elements


@dataclass(frozen=True)
class MemberAccess(Node):
    """computed=True is item access obj[prop]; False is attribute access obj.prop
    (property is then an Identifier)."""
    object: Node
    property: Node
    computed: bool = True

    def children(self):
        yield self.object
        yield self.property


@dataclass(frozen=True)
class Conditional(Node):
    test: Node
    consequent: Node
    alternate: Node

    def children(self):
        yield self.test
        yield self.consequent
        yield self.alternate


@dataclass(frozen=True)
class FunctionLiteral(Node):
    params: list[Identifier]
    body: list[Node]
    implicit_return: Node
    rest: Optional[Identifier] = None

    def children(self):
        yield from self.params
        if self.rest is not None:
            yield self.rest
        yield from self.body
        yield self.implicit_return


@dataclass(frozen=True)
class VariableDecl(Node):
    is_expression: ClassVar[bool] = False
    name: Node
    init: Node

    def children(self):
        yield self.name
        yield self.init


@dataclass(frozen=True)
class Call(Node):
    callee: Node
    args: list[Node] = field(default_factory=list)

    def children(self):
        yield self.callee
        yield from self.args


@dataclass(frozen=True)
class Assignment(Node):
    target: Node
    value: Node

    def children(self):
        yield self.target
        yield self.value


@dataclass(frozen=True)
class NewExpression(Node):
    """Construct a host object: callee(*args). The Python host has no `new`."""
    callee: Node
    args: list[Node] = field(default_factory=list)

    def children(self):
        yield self.callee
        yield from self.args


@dataclass(frozen=True)
class ExpressionStatement(Node):
    is_expression: ClassVar[bool] = False
    expr: Node

    def children(self):
        yield self.expr


@dataclass(frozen=True)
class Return(Node):
    is_expression: ClassVar[bool] = False
    expr: Node

    def children(self):
        yield self.expr


@dataclass(frozen=True)
class Block(Node):
    is_expression: ClassVar[bool] = False
    statements: list[Node] = field(default_factory=list)

    def children(self):
        yield from self.statements


@dataclass(frozen=True)
class Unknown(Node):
    """Placeholder for a form that could not be grown.

    reason is "arity" (wrong argument count for a fixed-arity form), "shape"
    (an argument of the wrong kind, e.g. a non-symbol name) or "dispatch" (a
    value that is not an s-expression). Rendered as None unless
    the session runs in strict mode.
    """
    reason: str
    form: Any = None
    detail: str = ""


def walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal of an IR tree."""
    yield node
    for child in node.children():
        yield from walk(child)


def find_unknown(node: Node) -> Optional[Unknown]:
    for sub in walk(node):
        if isinstance(sub, Unknown):
            return sub
    return None
