"""Special form: `.` (method call).

(. obj method arg...) calls obj.method(arg...). The method name is taken
literally and never grown.

The callee is a non-computed MemberAccess, which lowers to attribute lookup
(`obj.method`) and not to a subscript with a literal key (`obj["method"]`).
Python finds methods by attribute; `get` is the subscript form.
"""

from __future__ import annotations

from sprout import GrowFn, SExpression
from sprout.ir.nodes import Node, Identifier, MemberAccess, Call, Unknown
from sprout.types.symbol import Symbol


def method_call_form(tail: list[SExpression], grow: GrowFn) -> Node:
    if len(tail) < 2:
        return Unknown("arity", tail, ". requires an object and a method name")

    obj, method, *args = tail
    if isinstance(method, Symbol):
        method_name = method.name
    elif isinstance(method, str):
        method_name = method
    else:
        return Unknown("shape", method, f"Method name must be a symbol, got {method!r}")

    callee = MemberAccess(grow(obj), Identifier(method_name), computed=False)
    return Call(callee, [grow(arg) for arg in args])
