import pytest

from sprout.errors import SproutRuntimeFault
from sprout.runtime.context import ExecutionContext
from sprout.types.macro_registry import MacroRegistry
from sprout.types.symbol import Symbol, Keyword


@pytest.fixture
def registry():
    return MacroRegistry()


@pytest.fixture
def context(registry):
    return ExecutionContext(registry)


def test_trailing_expression_value_is_returned(context):
    assert context.execute("1 + 2") == 3


def test_statements_return_none(context):
    assert context.execute("x = 3") is None


def test_bindings_persist_between_calls(context):
    context.execute("x = 3")
    assert context.execute("x + 4") == 7


def test_multi_statement_source(context):
    assert context.execute("a = 2\nb = 5\na * b") == 10


def test_seeded_constructors(context):
    assert context.execute("Symbol('a')") == Symbol("a")
    assert context.execute("Keyword('k')") == Keyword("k")


def test_registry_is_shared_by_reference(context, registry):
    context.execute("macros['m'] = lambda: 1")
    assert registry.is_macro("m")
    assert registry.lookup("m")() == 1
    registry.define_macro("n", lambda: 2)
    assert context.execute("macros['n']()") == 2


def test_extra_bindings(registry):
    context = ExecutionContext(registry, bindings={"answer": 42})
    assert context.execute("answer") == 42


def test_define_and_lookup(context):
    context.define("y", 5)
    assert "y" in context
    assert context.execute("y * 2") == 10
    context.execute("y = 6")
    assert context.lookup("y") == 6


def test_faults_are_wrapped_with_their_cause(context):
    with pytest.raises(SproutRuntimeFault) as exc_info:
        context.execute("1 / 0")
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
    assert exc_info.value.source == "1 / 0"


def test_invalid_source_is_a_fault(context):
    with pytest.raises(SproutRuntimeFault):
        context.execute("return 1")


def test_effects_before_a_fault_are_kept(context):
    with pytest.raises(SproutRuntimeFault):
        context.execute("kept = 1\nundefined_name")
    assert context.lookup("kept") == 1
