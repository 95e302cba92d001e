"""Special form: fn.

Builds a function literal from an ungrown parameter list and body.
"""

from __future__ import annotations

from sprout import GrowFn, SExpression
from sprout.ir.nodes import (
    Node,
    Literal,
    Identifier,
    FunctionLiteral,
    ExpressionStatement,
    Unknown,
)
from sprout.types.symbol import Symbol

REST_MARKER = Symbol("&")


def grow_params(
    params: list[SExpression], grow: GrowFn
) -> tuple[list[Identifier], Identifier | None] | Unknown:
    """Grow a parameter list; `& name` at the end names the rest parameter."""
    fixed: list[Identifier] = []
    rest: Identifier | None = None
    i = 0
    while i < len(params):
        param = params[i]
        if param == REST_MARKER:
            if i != len(params) - 2 or not isinstance(params[i + 1], Symbol):
                return Unknown("shape", params, "& must be followed by exactly one symbol")
            rest = grow(params[i + 1])
            break
        if not isinstance(param, Symbol):
            return Unknown("shape", params, f"Parameter must be a symbol, got {param!r}")
        fixed.append(grow(param))
        i += 1
    return fixed, rest


def build_function(params: SExpression, body: list[SExpression], grow: GrowFn) -> Node:
    if not isinstance(params, list):
        return Unknown("shape", params, "fn requires a parameter list")
    grown_params = grow_params(params, grow)
    if isinstance(grown_params, Unknown):
        return grown_params
    fixed, rest = grown_params

    grown_body = [grow(form) for form in body]
    if not grown_body:
        return FunctionLiteral(fixed, [], Literal(None), rest)

    # Everything but the last form runs for effect; the last is returned
    statements = [
        ExpressionStatement(node) if node.is_expression else node
        for node in grown_body[:-1]
    ]
    return FunctionLiteral(fixed, statements, grown_body[-1], rest)


def fn_form(tail: list[SExpression], grow: GrowFn) -> Node:
    """(fn (params...) body...)"""
    if not tail:
        return Unknown("arity", [Symbol("fn")], "fn requires a parameter list")
    return build_function(tail[0], tail[1:], grow)
