"""Growth: one s-expression in, one IR node out.

Atoms map directly to leaf nodes. For a compound form only the head is
looked up, once, against the three registries in a fixed order:

    primitive > special form > macro > application

A primitive gets its arguments grown first. A special form gets the raw tail
and the grow function. A macro is a plain host callable: it is called with the
raw tail and whatever it returns is grown again, so expansions may expand
further.
"""

from __future__ import annotations

import enum
import numbers
from typing import Mapping, Callable

from sprout import SExpression
from sprout.errors import SproutError, SproutRuntimeFault
from sprout.ir.nodes import (
    Node,
    Literal,
    Identifier,
    UnaryOp,
    ArrayLiteral,
    Call,
    NewExpression,
    Unknown,
)
from sprout.growth.primitives import PRIMITIVES, PrimitiveFn
from sprout.growth.special_forms import SPECIAL_FORMS
from sprout.types.macro_registry import MacroRegistry
from sprout.types.symbol import Symbol, Keyword

KEYWORD_BINDING = "Keyword"


class Dispatch(enum.Enum):
    PRIMITIVE = "primitive"
    SPECIAL_FORM = "special-form"
    MACRO = "macro"
    APPLICATION = "application"


def is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Grower:
    """Grows s-expressions against a macro registry.

    The registry is shared by reference with the execution context; macros
    installed by executed code are visible to the very next `grow` call.
    """

    def __init__(
        self,
        macros: MacroRegistry,
        primitives: Mapping[str, PrimitiveFn] = PRIMITIVES,
        special_forms: Mapping[str, Callable] = SPECIAL_FORMS,
    ):
        self.macros = macros
        self.primitives = primitives
        self.special_forms = special_forms

    def classify(self, head: SExpression) -> Dispatch:
        if isinstance(head, Symbol):
            if head.name in self.primitives:
                return Dispatch.PRIMITIVE
            if head.name in self.special_forms:
                return Dispatch.SPECIAL_FORM
            if self.macros.is_macro(head.name):
                return Dispatch.MACRO
        return Dispatch.APPLICATION

    def shadows_macro(self, name: str) -> bool:
        """True if `name` resolves before the macro registry."""
        return name in self.primitives or name in self.special_forms

    def grow(self, sexp: SExpression) -> Node:
        # bool is checked before numbers: True is an int in Python
        if sexp is None or isinstance(sexp, (str, bool)):
            return Literal(sexp)
        if is_number(sexp):
            if sexp < 0:
                return UnaryOp("-", Literal(-sexp))
            return Literal(sexp)
        if isinstance(sexp, Symbol):
            return Identifier(sexp.name)
        if isinstance(sexp, Keyword):
            return NewExpression(Identifier(KEYWORD_BINDING), [Literal(sexp.name)])
        if isinstance(sexp, list):
            if not sexp:
                return ArrayLiteral([])
            return self.grow_form(sexp[0], sexp[1:])
        return Unknown("dispatch", sexp, f"Cannot grow {type(sexp).__name__} value {sexp!r}")

    def grow_form(self, head: SExpression, tail: list[SExpression]) -> Node:
        kind = self.classify(head)
        if kind is Dispatch.PRIMITIVE:
            return self.primitives[head.name]([self.grow(x) for x in tail])
        if kind is Dispatch.SPECIAL_FORM:
            return self.special_forms[head.name](tail, self.grow)
        if kind is Dispatch.MACRO:
            return self.grow(self.expand_macro(head.name, tail))
        return Call(self.grow(head), [self.grow(x) for x in tail])

    def expand_macro(self, name: str, tail: list[SExpression]) -> SExpression:
        transformer = self.macros.lookup(name)
        try:
            return transformer(*tail)
        except SproutError:
            raise
        except Exception as exc:
            raise SproutRuntimeFault(f"Macro {name!r} failed: {exc}") from exc
