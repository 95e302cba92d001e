"""Special form: symbol.

(symbol foo) evaluates, at run time, to Symbol("foo"). Macros use it to build
code that mentions names.
"""

from __future__ import annotations

from sprout import GrowFn, SExpression
from sprout.ir.nodes import Node, Literal, Identifier, NewExpression, Unknown
from sprout.types.symbol import Symbol

SYMBOL_BINDING = "Symbol"


def symbol_form(tail: list[SExpression], grow: GrowFn) -> Node:
    if len(tail) != 1:
        return Unknown("arity", tail, "symbol expects exactly 1 argument")
    name = tail[0]
    if isinstance(name, Symbol):
        name = name.name
    if not isinstance(name, str):
        return Unknown("shape", tail[0], f"symbol expects a name, got {tail[0]!r}")
    return NewExpression(Identifier(SYMBOL_BINDING), [Literal(name)])
