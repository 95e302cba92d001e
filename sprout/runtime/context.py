from __future__ import annotations

import ast
from typing import Any

from sprout import HostValue
from sprout.errors import SproutRuntimeFault
from sprout.emitter.emitter import STORE_ATTR_HELPER, STORE_ITEM_HELPER, STRICT_EQ_HELPER
from sprout.growth.special_forms.defmacro_form import MACROS_BINDING
from sprout.growth.special_forms.symbol_form import SYMBOL_BINDING
from sprout.growth.grower import KEYWORD_BINDING
from sprout.runtime.helpers import store_item, store_attr, strict_eq
from sprout.types.macro_registry import MacroRegistry
from sprout.types.symbol import Symbol, Keyword


class ExecutionContext:
    """
    Persistent namespace that runs emitted Python source.

    Bindings survive between `execute` calls for the whole run. The macro
    registry is bound by reference as `macros`, so code executed here can
    install macros that the grower sees on its next form.
    """

    def __init__(
        self,
        macros: MacroRegistry,
        bindings: dict[str, Any] | None = None,
        filename: str = "<sprout>",
    ):
        self.macros = macros
        self.filename = filename
        self.namespace: dict[str, Any] = {
            "__name__": "__sprout__",
            SYMBOL_BINDING: Symbol,
            KEYWORD_BINDING: Keyword,
            MACROS_BINDING: macros,
            STORE_ITEM_HELPER: store_item,
            STORE_ATTR_HELPER: store_attr,
            STRICT_EQ_HELPER: strict_eq,
        }
        if bindings:
            self.namespace.update(bindings)

    def define(self, name: str, value: Any) -> None:
        self.namespace[name] = value

    def lookup(self, name: str) -> Any:
        return self.namespace[name]

    def __contains__(self, name: str) -> bool:
        return name in self.namespace

    def execute(self, source: str) -> HostValue:
        """Run `source`; return the value of its trailing expression statement,
        or None when it ends with any other statement."""
        try:
            module = ast.parse(source, filename=self.filename, mode="exec")
            trailing = None
            if module.body and isinstance(module.body[-1], ast.Expr):
                trailing = ast.Expression(body=module.body.pop().value)
            exec(compile(module, self.filename, "exec"), self.namespace)
            if trailing is None:
                return None
            return eval(compile(trailing, self.filename, "eval"), self.namespace)
        except Exception as exc:
            raise SproutRuntimeFault(f"{type(exc).__name__}: {exc}", source) from exc
