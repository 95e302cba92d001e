import pytest

from sprout.errors import SproutRuntimeFault
from sprout.growth.grower import Grower
from sprout.ir.nodes import Literal, Identifier, BinaryOp, Call
from sprout.reader.parser import read
from sprout.types.macro_registry import MacroRegistry
from sprout.types.symbol import Symbol


def grow_src(grower, source):
    (form,) = read(source)
    return grower.grow(form)


# -------------------------
# Registry
# -------------------------

def test_registry_starts_empty():
    assert len(MacroRegistry()) == 0


def test_registry_mapping_protocol(macros):
    fn = lambda x: x
    macros["m"] = fn
    assert "m" in macros
    assert macros["m"] is fn
    assert list(macros) == ["m"]


def test_redefinition_replaces(macros):
    macros.define_macro("m", lambda: 1)
    macros.define_macro("m", lambda: 2)
    assert macros.lookup("m")() == 2


def test_registry_rejects_non_callables(macros):
    with pytest.raises(TypeError):
        macros["m"] = 42


def test_gensym_is_fresh(macros):
    first, second = macros.gen_sym(), macros.gen_sym("tmp")
    assert first == Symbol("G1")
    assert second == Symbol("tmp2")


def test_expand_1_only_touches_the_head(macros):
    macros.define_macro("inc", lambda x: [Symbol("+"), x, 1])
    assert macros.expand_1([Symbol("inc"), 5]) == [Symbol("+"), 5, 1]
    assert macros.expand_1([Symbol("f"), [Symbol("inc"), 5]]) == [Symbol("f"), [Symbol("inc"), 5]]


def test_expand_reaches_a_fixed_point(macros):
    macros.define_macro("inc", lambda x: [Symbol("+"), x, 1])
    macros.define_macro("wrapinc", lambda y: [Symbol("inc"), y])
    assert macros.expand([Symbol("wrapinc"), 10]) == [Symbol("+"), 10, 1]


def test_expand_respects_shadowed_names(macros):
    macros.define_macro("+", lambda a, b: [Symbol("list"), a, b])
    form = [Symbol("+"), 1, 2]
    assert macros.expand(form, shadowed=lambda name: name == "+") == form


# -------------------------
# Expansion during growth
# -------------------------

def test_macro_receives_the_raw_tail_and_its_result_is_regrown(grower, macros):
    seen = []

    def twice(*tail):
        seen.append(tail)
        return [Symbol("do"), tail[0], tail[0]]

    macros.define_macro("twice", twice)
    node = grow_src(grower, "(twice 5)")
    assert seen == [(5,)]
    assert node == Call(Identifier("do"), [Literal(5), Literal(5)])


def test_macro_arguments_are_not_grown(grower, macros):
    macros.define_macro("first", lambda a, b: a)
    # (boom) would be an application if it were grown; it is passed as data
    node = grow_src(grower, "(first (+ 1 2) (boom))")
    assert node == BinaryOp("+", Literal(1), Literal(2))


def test_expansion_is_not_capped_at_one_level(grower, macros):
    macros.define_macro("a", lambda: [Symbol("b")])
    macros.define_macro("b", lambda: [Symbol("c")])
    macros.define_macro("c", lambda: 42)
    assert grow_src(grower, "(a)") == Literal(42)


def test_macros_expand_inside_arguments(grower, macros):
    macros.define_macro("one", lambda: 1)
    assert grow_src(grower, "(+ (one) (one))") == BinaryOp("+", Literal(1), Literal(1))


def test_macro_may_return_an_atom(grower, macros):
    macros.define_macro("neg", lambda: -4)
    assert grow_src(grower, "(neg)") == grower.grow(-4)


def test_failing_macro_is_a_runtime_fault(grower, macros):
    macros.define_macro("bad", lambda: 1 / 0)
    with pytest.raises(SproutRuntimeFault) as exc_info:
        grow_src(grower, "(bad)")
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


# -------------------------
# Precedence: primitive > special form > macro > application
# -------------------------

@pytest.mark.parametrize("name", ["+", "if", "def", "list", "="])
def test_macro_cannot_shadow_a_primitive(grower, macros, name):
    form = [Symbol(name), Symbol("a"), Symbol("b")]
    expected = Grower(MacroRegistry()).grow(form)
    # The macro would raise if it were ever called
    macros.define_macro(name, lambda *tail: 0 / 0)
    assert grower.grow(form) == expected


def test_macro_cannot_shadow_a_special_form(grower, macros):
    macros.define_macro("quote", lambda x: 0 / 0)
    assert grow_src(grower, "(quote x)") == Literal(Symbol("x"))


def test_macro_wins_over_application(grower, macros):
    assert isinstance(grow_src(grower, "(m)"), Call)
    macros.define_macro("m", lambda: 7)
    assert grow_src(grower, "(m)") == Literal(7)
