from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (sprout package directory)
_SPROUT_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _SPROUT_DIR / 'prelude'
_PRELUDE_RELPATH = Path('std') / 'core.lisp'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_prelude_path() -> Path:
    # SPROUT_PRELUDE_PATH may name the prelude file or a directory holding std/core.lisp
    p = paths_from_env('SPROUT_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])[0]
    return p / _PRELUDE_RELPATH if p.is_dir() else p


def get_strict() -> bool:
    return flag_from_env('SPROUT_STRICT')


def get_verbose() -> bool:
    return flag_from_env('SPROUT_VERBOSE')
