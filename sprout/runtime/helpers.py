"""Host functions that emitted code relies on, bound into every context."""
from __future__ import annotations

from typing import Any


def store_item(obj: Any, key: Any, value: Any) -> Any:
    """obj[key] = value, usable as an expression."""
    obj[key] = value
    return value


def store_attr(obj: Any, name: str, value: Any) -> Any:
    """setattr(obj, name, value), usable as an expression."""
    setattr(obj, name, value)
    return value


def strict_eq(a: Any, b: Any) -> bool:
    """Equality without bool/number mixing: (= 1 true) is false."""
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b
