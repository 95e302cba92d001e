from sprout import GrowFn, SExpression
from sprout.ir.nodes import Node, Literal, Unknown


def quote_form(tail: list[SExpression], grow: GrowFn) -> Node:
    # The datum is carried as-is; growing it would compile it as code
    if len(tail) != 1:
        return Unknown("arity", tail, "quote expects exactly 1 argument")
    return Literal(tail[0])
