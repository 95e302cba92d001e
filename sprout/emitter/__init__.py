from __future__ import annotations

from .emitter import Emitter, mangle

__all__ = ["Emitter", "mangle"]
