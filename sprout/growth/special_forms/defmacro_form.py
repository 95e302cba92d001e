"""Special form: defmacro.

Grows to an assignment that, when executed, installs the function into the
macro registry bound as `macros` in the execution context. Nothing is
registered at growth time; the driver executes the form before growing the
next one.
"""

from __future__ import annotations

from sprout import GrowFn, SExpression
from sprout.ir.nodes import Node, Literal, Identifier, MemberAccess, Assignment, Unknown
from sprout.growth.special_forms.fn_form import build_function

MACROS_BINDING = "macros"


def defmacro_form(tail: list[SExpression], grow: GrowFn) -> Node:
    """(defmacro name (params...) body...)"""
    if len(tail) < 2:
        return Unknown("arity", tail, "defmacro requires a name and a parameter list")

    name = grow(tail[0])
    if not isinstance(name, Identifier):
        return Unknown("shape", tail[0], f"Macro name must be a symbol, got {tail[0]!r}")

    target = MemberAccess(Identifier(MACROS_BINDING), Literal(name.name), computed=True)
    return Assignment(target, build_function(tail[1], tail[2:], grow))
