import io

import pytest

from sprout.driver import Driver
from sprout.growth.grower import Grower
from sprout.session import CompilationSession
from sprout.types.macro_registry import MacroRegistry


# Tests must not pick up a developer's prelude or trace settings.
@pytest.fixture(autouse=True)
def _clean_sprout_env(monkeypatch):
    for var in ("SPROUT_PRELUDE_PATH", "SPROUT_STRICT", "SPROUT_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def macros():
    """Empty macro registry."""
    return MacroRegistry()


@pytest.fixture
def grower(macros):
    return Grower(macros)


@pytest.fixture
def session():
    """Session without the standard library."""
    return CompilationSession()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def driver(out):
    """Driver with the bundled standard library already loaded."""
    d = Driver(out)
    d.load_prelude()
    return d
