from __future__ import annotations
from typing import Callable, Iterator
from itertools import count

from sprout import SExpression
from sprout.types.symbol import Symbol


MacroFn = Callable[..., SExpression]


class MacroRegistry:
    """
    Mutable table mapping macro names (str) to host callables.

    One registry lives for a whole driver run. The grower reads it when it
    classifies a form's head; executed code writes it through the `macros`
    binding of the execution context (`macros["name"] = fn`), so both sides
    see the same object.

    Features:
    - Head-position expansion, single step or to a fixed point
    - Redefinition (later definition of a name replaces the earlier one)
    - gensym counter for macros that need fresh names
    """

    def __init__(self):
        self.macros: dict[str, MacroFn] = {}
        self._gensym_counter = count(1)

    def define_macro(self, name: str, transformer: MacroFn) -> None:
        if not callable(transformer):
            raise TypeError(f"Macro {name!r} must be callable, got {transformer!r}")
        self.macros[name] = transformer

    def is_macro(self, name: str) -> bool:
        return name in self.macros

    def lookup(self, name: str) -> MacroFn:
        return self.macros[name]

    def gen_sym(self, prefix: str = "G") -> Symbol:
        return Symbol(f"{prefix}{next(self._gensym_counter)}")

    # Mapping protocol used by emitted code: macros["twice"] = _sp_fn__1
    def __setitem__(self, name: str, transformer: MacroFn) -> None:
        self.define_macro(name, transformer)

    def __getitem__(self, name: str) -> MacroFn:
        return self.macros[name]

    def __contains__(self, name: object) -> bool:
        return name in self.macros

    def __iter__(self) -> Iterator[str]:
        return iter(self.macros)

    def __len__(self) -> int:
        return len(self.macros)

    def __repr__(self):
        return f"MacroRegistry({sorted(self.macros)!r})"

    # Single-step head expansion
    def expand_1(
        self, form: SExpression, shadowed: Callable[[str], bool] | None = None
    ) -> SExpression:
        """Expand only the head-position macro if present.

        `shadowed` names heads that resolve before the macro table (primitives
        and special forms); those are never expanded.
        """
        if isinstance(form, list) and form:
            head = form[0]
            if (
                isinstance(head, Symbol)
                and self.is_macro(head.name)
                and not (shadowed and shadowed(head.name))
            ):
                return self.macros[head.name](*form[1:])
        return form  # Not a macro call, unchanged

    # Fixed-point head expansion
    def expand(
        self, form: SExpression, shadowed: Callable[[str], bool] | None = None
    ) -> SExpression:
        cur = form
        while True:
            nxt = self.expand_1(cur, shadowed)
            # Use structural equality to detect fixpoint (not object identity)
            if nxt == cur:
                return cur
            cur = nxt
