"""Printers for verbose traces: s-expressions in Lisp notation and IR trees
as indented outlines."""
from __future__ import annotations

from dataclasses import fields

from sprout import SExpression
from sprout.ir.nodes import Node, Literal, Identifier
from sprout.types.symbol import Symbol, Keyword

DEFAULT_OPTIONS = {
    "indent": 2,
    "max_depth": 12,
}


def format_sexp(obj: SExpression) -> str:
    """Render a form the way the reader would accept it back."""
    if obj is None:
        return "null"
    if obj is True:
        return "true"
    if obj is False:
        return "false"
    if isinstance(obj, (Symbol, Keyword)):
        return str(obj)
    if isinstance(obj, str):
        return '"' + obj.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'
    if isinstance(obj, list):
        return "(" + " ".join(format_sexp(x) for x in obj) + ")"
    return repr(obj)


def _leaf(node: Node) -> str | None:
    if isinstance(node, Literal):
        value = node.value
        shown = format_sexp(value) if isinstance(value, (list, Symbol, Keyword)) else repr(value)
        return f"Literal {shown}"
    if isinstance(node, Identifier):
        return f"Identifier {node.name}"
    return None


def format_ir(node: Node, options: dict = DEFAULT_OPTIONS) -> str:
    """Indented outline of an IR tree, one node per line."""
    lines: list[str] = []
    pad = " " * options.get("indent", 2)
    max_depth = options.get("max_depth", 12)

    def visit(n, label: str, depth: int):
        prefix = pad * depth + (f"{label}: " if label else "")
        if not isinstance(n, Node):
            lines.append(f"{prefix}{n!r}")
            return
        leaf = _leaf(n)
        if leaf is not None:
            lines.append(prefix + leaf)
            return
        if depth >= max_depth:
            lines.append(f"{prefix}{type(n).__name__} ...")
            return
        scalars = []
        nested = []
        for f in fields(n):
            if f.name == "form":
                continue
            value = getattr(n, f.name)
            if isinstance(value, (Node, list)):
                nested.append((f.name, value))
            else:
                scalars.append(f"{f.name}={value!r}")
        head = type(n).__name__ + (" " + " ".join(scalars) if scalars else "")
        lines.append(prefix + head)
        for name, value in nested:
            if isinstance(value, list):
                lines.append(f"{pad * (depth + 1)}{name}: [{'' if value else ']'}")
                for item in value:
                    visit(item, "", depth + 2)
                if value:
                    lines.append(f"{pad * (depth + 1)}]")
            else:
                visit(value, name, depth + 1)

    visit(node, "", 0)
    return "\n".join(lines)
