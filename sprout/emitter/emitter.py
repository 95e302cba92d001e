"""
  IR -> Python source.

The IR is lowered to Python `ast` nodes and rendered with `ast.unparse`.

Python lambdas cannot hold statements, so a function literal whose body needs
any statement is hoisted: a `def _sp_fn__N(...)` is appended to the enclosing
statement list ahead of the statement that uses it, and the literal itself
becomes a reference to that name. Hoisting happens inside the enclosing
function when there is one, so closures see the right variables.

Names are mangled reversibly. A name that is already a usable Python
identifier passes through unchanged. Any other name is escaped under the
`_sp_` prefix, with `_` doubled and other characters written as `_` plus a
code letter. Two different Lisp names never map to the same Python name.
Hoisted functions and runtime helpers take the escaped spelling of a plain
name, which `mangle` never produces, so user bindings cannot clobber them.
"""

from __future__ import annotations

import ast
import keyword
from itertools import count

from sprout.errors import SproutEmitError
from sprout.ir.nodes import (
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
)
from sprout.types.symbol import Symbol, Keyword

MANGLE_PREFIX = "_sp_"

# `u` is taken by the \u escape and must not appear here.
CHAR_CODES: dict[str, str] = {
    "-": "h",
    "?": "p",
    "!": "b",
    "*": "x",
    "+": "a",
    "/": "s",
    "<": "l",
    ">": "g",
    "=": "e",
    "%": "m",
    "&": "n",
    ".": "d",
    ":": "c",
    "$": "v",
    "@": "t",
    "#": "o",
}


def escape(name: str) -> str:
    out = []
    for ch in name:
        if ch == "_":
            out.append("__")
        elif ch.isascii() and ch.isalnum():
            out.append(ch)
        elif ch in CHAR_CODES:
            out.append("_" + CHAR_CODES[ch])
        else:
            out.append(f"_u{ord(ch):x}_")
    return MANGLE_PREFIX + "".join(out)


def is_plain(name: str) -> bool:
    return (
        name.isidentifier()
        and name.isascii()
        and not keyword.iskeyword(name)
        and not name.startswith(MANGLE_PREFIX)
    )


def mangle(name: str) -> str:
    """Map a Lisp name to a Python identifier, one to one."""
    return name if is_plain(name) else escape(name)


def reserved(name: str) -> str:
    """Compiler-owned spelling of a plain name; outside the range of `mangle`."""
    assert is_plain(name), name
    return escape(name)


STORE_ITEM_HELPER = reserved("store_item")
STORE_ATTR_HELPER = reserved("store_attr")
STRICT_EQ_HELPER = reserved("strict_eq")

UNARY_OPS: dict[str, type[ast.unaryop]] = {
    "-": ast.USub,
    "!": ast.Not,
}

BINARY_OPS: dict[str, type[ast.operator]] = {
    "+": ast.Add,
    "-": ast.Sub,
    "*": ast.Mult,
    "/": ast.Div,
}

# `===` is not here: it lowers to a STRICT_EQ_HELPER call, since Python ==
# holds between bools and ints.
COMPARE_OPS: dict[str, type[ast.cmpop]] = {
    "<": ast.Lt,
    ">": ast.Gt,
    "<=": ast.LtE,
    ">=": ast.GtE,
}


def load(name: str) -> ast.Name:
    return ast.Name(id=name, ctx=ast.Load())


def call(func: ast.expr, args: list[ast.expr]) -> ast.Call:
    return ast.Call(func=func, args=args, keywords=[])


class Emitter:
    """Renders IR trees to Python source. Hoisted function names are numbered
    per emitter, so one emitter must be used for a whole run."""

    def __init__(self, fn_prefix: str = "fn_"):
        self.fn_prefix = fn_prefix
        self._fn_counter = count(1)

    def emit(self, node: Node) -> str:
        return ast.unparse(self.lower(node))

    def lower(self, node: Node) -> ast.Module:
        body: list[ast.stmt] = []
        self.statement(node, body)
        return ast.fix_missing_locations(ast.Module(body=body, type_ignores=[]))

    # -------------------------------
    # Statements
    # -------------------------------
    def statement(self, node: Node, out: list[ast.stmt]) -> None:
        """Lower `node` in statement position, appending to `out`."""
        if isinstance(node, Block):
            for stmt in node.statements:
                self.statement(stmt, out)
            return
        if isinstance(node, VariableDecl):
            value = self.expression(node.init, out)
            out.append(ast.Assign(targets=[self.store_name(node.name)], value=value))
            return
        if isinstance(node, Assignment):
            value = self.expression(node.value, out)
            target = self.store_target(node.target, out)
            out.append(ast.Assign(targets=[target], value=value))
            return
        if isinstance(node, Return):
            out.append(ast.Return(value=self.expression(node.expr, out)))
            return
        if isinstance(node, ExpressionStatement):
            node = node.expr
        out.append(ast.Expr(value=self.expression(node, out)))

    def store_name(self, node: Node) -> ast.Name:
        if not isinstance(node, Identifier):
            raise SproutEmitError(f"Cannot bind to {node!r}")
        return ast.Name(id=mangle(node.name), ctx=ast.Store())

    def store_target(self, node: Node, out: list[ast.stmt]) -> ast.expr:
        if isinstance(node, MemberAccess):
            obj = self.expression(node.object, out)
            if node.computed:
                key = self.expression(node.property, out)
                return ast.Subscript(value=obj, slice=key, ctx=ast.Store())
            return ast.Attribute(value=obj, attr=self.attribute_name(node.property), ctx=ast.Store())
        return self.store_name(node)

    # -------------------------------
    # Expressions
    # -------------------------------
    def expression(self, node: Node, out: list[ast.stmt]) -> ast.expr:
        """Lower `node` in expression position; hoisted definitions go to `out`."""
        if isinstance(node, Literal):
            return self.literal(node.value)
        if isinstance(node, Identifier):
            return load(mangle(node.name))
        if isinstance(node, UnaryOp):
            op = UNARY_OPS.get(node.op)
            if op is None:
                raise SproutEmitError(f"Unknown unary operator {node.op!r}")
            return ast.UnaryOp(op=op(), operand=self.expression(node.operand, out))
        if isinstance(node, BinaryOp):
            return self.binary(node, out)
        if isinstance(node, ArrayLiteral):
            return ast.List(elts=[self.expression(e, out) for e in node.elements], ctx=ast.Load())
        if isinstance(node, MemberAccess):
            obj = self.expression(node.object, out)
            if node.computed:
                return ast.Subscript(value=obj, slice=self.expression(node.property, out), ctx=ast.Load())
            return ast.Attribute(value=obj, attr=self.attribute_name(node.property), ctx=ast.Load())
        if isinstance(node, Conditional):
            return ast.IfExp(
                test=self.expression(node.test, out),
                body=self.expression(node.consequent, out),
                orelse=self.expression(node.alternate, out),
            )
        if isinstance(node, FunctionLiteral):
            return self.function(node, out)
        if isinstance(node, (Call, NewExpression)):
            return call(self.expression(node.callee, out), [self.expression(a, out) for a in node.args])
        if isinstance(node, VariableDecl):
            return ast.NamedExpr(target=self.store_name(node.name), value=self.expression(node.init, out))
        if isinstance(node, Assignment):
            return self.assignment_expression(node, out)
        if isinstance(node, ExpressionStatement):
            return self.expression(node.expr, out)
        if isinstance(node, Unknown):
            return ast.Constant(value=None)
        raise SproutEmitError(f"{type(node).__name__} cannot be used as an expression")

    def literal(self, value) -> ast.expr:
        if value is None or isinstance(value, (bool, int, float, complex, str)):
            return ast.Constant(value=value)
        if isinstance(value, Symbol):
            return call(load("Symbol"), [ast.Constant(value=value.name)])
        if isinstance(value, Keyword):
            return call(load("Keyword"), [ast.Constant(value=value.name)])
        if isinstance(value, list):
            return ast.List(elts=[self.literal(v) for v in value], ctx=ast.Load())
        if isinstance(value, tuple):
            return ast.Tuple(elts=[self.literal(v) for v in value], ctx=ast.Load())
        if isinstance(value, dict):
            return ast.Dict(
                keys=[self.literal(k) for k in value],
                values=[self.literal(v) for v in value.values()],
            )
        raise SproutEmitError(f"Cannot render {type(value).__name__} literal {value!r}")

    def binary(self, node: BinaryOp, out: list[ast.stmt]) -> ast.expr:
        left = self.expression(node.left, out)
        right = self.expression(node.right, out)
        if node.op in BINARY_OPS:
            return ast.BinOp(left=left, op=BINARY_OPS[node.op](), right=right)
        if node.op == "===":
            return call(load(STRICT_EQ_HELPER), [left, right])
        if node.op in COMPARE_OPS:
            return ast.Compare(left=left, ops=[COMPARE_OPS[node.op]()], comparators=[right])
        raise SproutEmitError(f"Unknown binary operator {node.op!r}")

    def attribute_name(self, node: Node) -> str:
        if isinstance(node, Identifier):
            return mangle(node.name)
        if isinstance(node, Literal) and isinstance(node.value, str):
            return mangle(node.value)
        raise SproutEmitError(f"Attribute name must be an identifier, got {node!r}")

    def assignment_expression(self, node: Assignment, out: list[ast.stmt]) -> ast.expr:
        target = node.target
        if isinstance(target, MemberAccess):
            obj = self.expression(target.object, out)
            value = self.expression(node.value, out)
            if target.computed:
                key = self.expression(target.property, out)
                return call(load(STORE_ITEM_HELPER), [obj, key, value])
            attr = ast.Constant(value=self.attribute_name(target.property))
            return call(load(STORE_ATTR_HELPER), [obj, attr, value])
        return ast.NamedExpr(target=self.store_name(target), value=self.expression(node.value, out))

    def function(self, node: FunctionLiteral, out: list[ast.stmt]) -> ast.expr:
        rest = mangle(node.rest.name) if node.rest is not None else None
        args = ast.arguments(
            posonlyargs=[],
            args=[ast.arg(arg=mangle(p.name)) for p in node.params],
            vararg=ast.arg(arg=rest) if rest else None,
            kwonlyargs=[],
            kw_defaults=[],
            kwarg=None,
            defaults=[],
        )
        body: list[ast.stmt] = []
        if rest:
            # *args arrive as a tuple; forms are lists
            spread = ast.List(elts=[ast.Starred(value=load(rest), ctx=ast.Load())], ctx=ast.Load())
            body.append(ast.Assign(targets=[ast.Name(id=rest, ctx=ast.Store())], value=spread))
        for stmt in node.body:
            self.statement(stmt, body)
        result = self.expression(node.implicit_return, body)
        if not body:
            return ast.Lambda(args=args, body=result)

        body.append(ast.Return(value=result))
        name = reserved(f"{self.fn_prefix}{next(self._fn_counter)}")
        out.append(
            ast.FunctionDef(
                name=name,
                args=args,
                body=body,
                decorator_list=[],
                returns=None,
                type_comment=None,
                type_params=[],
            )
        )
        return load(name)
