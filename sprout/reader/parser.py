"""
  Sprout Reader: Lexer and Parser

- Streaming lexer, recursive-descent parser over a token stream
- Emits plain Python values, no Cons cells:

    - null / nil      -> None
    - true / false    -> bool
    - numbers         -> int / float
    - strings         -> str
    - :name           -> Keyword("name")
    - other atoms     -> Symbol
    - ( ... )         -> list
    - 'x              -> [Symbol("quote"), x]
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from sprout import SExpression
from sprout.errors import SproutSyntaxError
from sprout.types.symbol import Symbol, Keyword


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols, numbers, keywords
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?\Z")

CONSTANTS: dict[str, SExpression] = {
    "true": True,
    "false": False,
    "null": None,
    "nil": None,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            if source[pos] == '"':
                raise SproutSyntaxError(f"Unterminated string starting at {pos}")
            raise SproutSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if nm != "comment" and m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(text: str) -> SExpression:
    if text in CONSTANTS:
        return CONSTANTS[text]
    if INT_RE.match(text):
        return int(text)
    if FLOAT_RE.match(text):
        return float(text)
    if text.startswith(":") and len(text) > 1:
        return Keyword(text[1:])
    return Symbol(text)


def parse_string(text: str) -> str:
    # Python string escapes; raw newlines inside the literal are allowed
    try:
        return ast.literal_eval(text.replace("\r", "\\r").replace("\n", "\\n"))
    except (SyntaxError, ValueError) as exc:
        raise SproutSyntaxError(f"Invalid string literal {text!r}: {exc}") from exc


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise SproutSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return parse_string(tok_val)

        if tok_type == "quote":
            if self.peek()[0] in (None, "rparen"):
                raise SproutSyntaxError("Quote must be followed by a form")
            return [Symbol("quote"), self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise SproutSyntaxError("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SproutSyntaxError("Unexpected ')'")

        raise SproutSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read a whole source unit. Raises SproutSyntaxError before returning
    anything if any part of the unit is malformed."""
    return list(TokenStream(lex(source)).parse_all())
