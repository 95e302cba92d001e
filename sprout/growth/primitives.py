"""Primitive operators.

Primitives receive their arguments already grown into IR and build a single
node from them. The table is fixed at import time; user code cannot add to it,
and a macro with the same name as a primitive is never consulted.
"""
from __future__ import annotations

from typing import Callable

from sprout.ir.nodes import (
    Node,
    Literal,
    Identifier,
    UnaryOp,
    BinaryOp,
    ArrayLiteral,
    MemberAccess,
    Conditional,
    VariableDecl,
    Unknown,
)

PrimitiveFn = Callable[[list[Node]], Node]

NULL = Literal(None)


def arity_unknown(name: str, args: list[Node], expected: str) -> Unknown:
    return Unknown(
        "arity",
        name,
        f"{name} expects {expected} argument(s), got {len(args)}",
    )


# -------------------------------
# Arithmetic
# -------------------------------
def fold(op: str, identity: int) -> PrimitiveFn:
    """Variadic operator: identity for no args, the arg itself for one, and
    (op (op a b) c) nesting for more."""

    def primitive(args: list[Node]) -> Node:
        if not args:
            return Literal(identity)
        if len(args) == 1:
            return args[0]
        return BinaryOp(op, primitive(args[:-1]), args[-1])

    primitive.__name__ = f"fold_{op}"
    return primitive


add = fold("+", 0)
mul = fold("*", 1)
div = fold("/", 1)


def sub(args: list[Node]) -> Node:
    """Zero args: 0; one arg: negation; otherwise nested subtraction."""
    if not args:
        return Literal(0)
    if len(args) == 1:
        return UnaryOp("-", args[0])
    if len(args) == 2:
        return BinaryOp("-", args[0], args[1])
    return BinaryOp("-", sub(args[:-1]), args[-1])


# -------------------------------
# Comparison
# -------------------------------
def compare(name: str, op: str) -> PrimitiveFn:
    def primitive(args: list[Node]) -> Node:
        if len(args) != 2:
            return arity_unknown(name, args, "exactly 2")
        return BinaryOp(op, args[0], args[1])

    primitive.__name__ = f"compare_{op}"
    return primitive


# -------------------------------
# Logic, data and binding
# -------------------------------
def not_(args: list[Node]) -> Node:
    if len(args) != 1:
        return arity_unknown("not", args, "exactly 1")
    return UnaryOp("!", args[0])


def list_(args: list[Node]) -> Node:
    return ArrayLiteral(list(args))


def get(args: list[Node]) -> Node:
    if len(args) != 2:
        return arity_unknown("get", args, "exactly 2")
    return MemberAccess(args[0], args[1], computed=True)


def def_(args: list[Node]) -> Node:
    if len(args) not in (1, 2):
        return arity_unknown("def", args, "1 or 2")
    if not isinstance(args[0], Identifier):
        return Unknown("shape", "def", "def expects a symbol as its name")
    init = args[1] if len(args) == 2 else NULL
    return VariableDecl(args[0], init)


def if_(args: list[Node]) -> Node:
    if len(args) not in (2, 3):
        return arity_unknown("if", args, "2 or 3")
    alternate = args[2] if len(args) == 3 else NULL
    return Conditional(args[0], args[1], alternate)


PRIMITIVES: dict[str, PrimitiveFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": compare("<", "<"),
    ">": compare(">", ">"),
    "<=": compare("<=", "<="),
    ">=": compare(">=", ">="),
    "=": compare("=", "==="),
    "not": not_,
    "list": list_,
    "get": get,
    "def": def_,
    "if": if_,
}
