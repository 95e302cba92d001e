from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from sprout import SExpression, HostValue
from sprout.errors import SproutArityError, SproutGrowthError
from sprout.emitter.emitter import Emitter, mangle
from sprout.growth.grower import Grower
from sprout.ir.nodes import Node, find_unknown
from sprout.reader.parser import read
from sprout.runtime.context import ExecutionContext
from sprout.types.macro_registry import MacroRegistry


@dataclass
class FormResult:
    form: SExpression
    node: Node
    source: str
    value: HostValue


class CompilationSession:
    """
    Owns the state of one compilation run: the macro registry, the grower and
    emitter that read it, and the execution context that writes it.

    Forms are processed strictly one at a time (grow, emit, execute), so a
    macro defined by one form is expanded while growing the next.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.macros = MacroRegistry()
        self.grower = Grower(self.macros)
        self.emitter = Emitter()
        self.context = ExecutionContext(self.macros)
        self.context.define("gensym", self.macros.gen_sym)
        self.context.define(mangle("macroexpand-1"), self.macroexpand_1)
        self.context.define("macroexpand", self.macroexpand)

    # -------------------------------
    # Pipeline steps
    # -------------------------------
    def grow(self, form: SExpression) -> Node:
        node = self.grower.grow(form)
        if self.strict:
            check_growth(node)
        return node

    def emit(self, node: Node) -> str:
        return self.emitter.emit(node)

    def execute(self, source: str) -> HostValue:
        return self.context.execute(source)

    def run_form(self, form: SExpression) -> FormResult:
        node = self.grow(form)
        source = self.emit(node)
        return FormResult(form, node, source, self.execute(source))

    def iter_source(self, code: str) -> Iterator[FormResult]:
        # The whole unit is read before anything runs: a syntax error
        # anywhere aborts before the first form is grown.
        for form in read(code):
            yield self.run_form(form)

    def eval(self, code: str) -> HostValue:
        results = [r.value for r in self.iter_source(code)]
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results

    # -------------------------------
    # Runtime helpers bound into the context
    # -------------------------------
    def macroexpand_1(self, form: SExpression) -> SExpression:
        return self.macros.expand_1(form, self.grower.shadows_macro)

    def macroexpand(self, form: SExpression) -> SExpression:
        return self.macros.expand(form, self.grower.shadows_macro)


def check_growth(node: Node) -> None:
    """Raise for the first Unknown placeholder in `node`, if any."""
    unknown = find_unknown(node)
    if unknown is None:
        return
    message = unknown.detail or f"Cannot grow {unknown.form!r}"
    if unknown.reason == "arity":
        raise SproutArityError(message)
    raise SproutGrowthError(message)
