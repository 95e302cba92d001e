from __future__ import annotations

# Public surface for the IR package
from .nodes import (
    Node,
    Literal,
    Identifier,
    UnaryOp,
    BinaryOp,
    ArrayLiteral,
    MemberAccess,
    Conditional,
    FunctionLiteral,
    VariableDecl,
    Call,
    Assignment,
    NewExpression,
    ExpressionStatement,
    Return,
    Block,
    Unknown,
    walk,
    find_unknown,
)

__all__ = [
    "Node",
    "Literal",
    "Identifier",
    "UnaryOp",
    "BinaryOp",
    "ArrayLiteral",
    "MemberAccess",
    "Conditional",
    "FunctionLiteral",
    "VariableDecl",
    "Call",
    "Assignment",
    "NewExpression",
    "ExpressionStatement",
    "Return",
    "Block",
    "Unknown",
    "walk",
    "find_unknown",
]
