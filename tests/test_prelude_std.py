import pytest

from sprout.types.symbol import Symbol


def ev(driver, source):
    values = driver.load_source(source)
    return values[-1]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(do 1 2 3)", 3),
        ("(do)", None),
        ("(when true 1 2)", 2),
        ("(when false 1 2)", None),
        ("(unless false 1 2)", 2),
        ("(unless true 1)", None),
        ("(comment anything (at all))", None),
        ("(inc 41)", 42),
        ("(dec 43)", 42),
        ("(let (a 1 b 2) (+ a b))", 3),
        ("(let () 5)", 5),
        ("(cond false 1 true 2)", 2),
        ("(cond false 1 false 2 3)", 3),
        ("(cond false 1)", None),
        ("(cond)", None),
        ("(and 1 2)", 2),
        ("(and 0 2)", 0),
        ("(or 0 2)", 2),
        ("(or 1 2)", 1),
    ],
)
def test_std_forms(driver, source, expected):
    assert ev(driver, source) == expected


def test_identity(driver):
    assert ev(driver, "(identity (quote sym))") == Symbol("sym")


def test_defn_defines_a_function(driver):
    assert ev(driver, "(defn add3 (a b c) (+ a b c)) (add3 1 2 3)") == 6


def test_defn_multi_statement_body(driver):
    source = """
    (defn fact (n)
      (def smaller (- n 1))
      (if (<= n 1) 1 (* n (fact smaller))))
    (fact 5)
    """
    assert ev(driver, source) == 120


def test_or_evaluates_its_first_operand_once(driver):
    source = """
    (def hits (list))
    (defn touch (v) (. hits append v) v)
    (or (touch 0) 5)
    """
    assert ev(driver, source) == 5
    assert driver.session.context.lookup("hits") == [0]


def test_or_uses_fresh_names(driver):
    expansion = ev(driver, "(macroexpand-1 (quote (or x y)))")
    param = expansion[0][1][0]
    assert isinstance(param, Symbol)
    assert param != Symbol("x")


def test_user_macro_built_on_std_macros(driver):
    source = """
    (defmacro swap-if (c a b) (list (quote if) c b a))
    (defmacro both (x) (list (quote do) (list (quote swap-if) true 0 x) x))
    (both 9)
    """
    assert ev(driver, source) == 9


def test_method_calls_on_host_objects(driver):
    assert ev(driver, '(. "a-b-c" replace "-" "+")') == "a+b+c"
    assert ev(driver, "(. (list 3 1 2) index 2)") == 2


def test_keywords_at_runtime(driver):
    value = ev(driver, ":color")
    assert value.name == "color"
