from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("symbol", self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Keyword:
    """Colon-prefixed identifier; `:name` is read as Keyword("name")."""
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("keyword", self.name))

    def __repr__(self):
        return f"Keyword({self.name!r})"

    def __str__(self):
        return f":{self.name}"
