import pytest

from sprout.errors import SproutSyntaxError
from sprout.reader.parser import lex, read, TokenStream
from sprout.types.symbol import Symbol, Keyword


def S(name):
    return Symbol(name)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", [42]),
        ("-7", [-7]),
        ("+3", [3]),
        ("3.5", [3.5]),
        ("-0.25", [-0.25]),
        ("1e3", [1000.0]),
        ('"hello"', ["hello"]),
        ('"a\\nb"', ["a\nb"]),
        ('"say \\"hi\\""', ['say "hi"']),
        ("true false", [True, False]),
        ("null nil", [None, None]),
        ("foo", [S("foo")]),
        ("-", [S("-")]),
        (".", [S(".")]),
        ("even?", [S("even?")]),
        (":name", [Keyword("name")]),
        ("()", [[]]),
        ("(+ 1 2)", [[S("+"), 1, 2]]),
        ("(a (b (c)))", [[S("a"), [S("b"), [S("c")]]]]),
        ("'x", [[S("quote"), S("x")]]),
        ("'(1 2)", [[S("quote"), [1, 2]]]),
        ("; only a comment", []),
        ("1 ; trailing\n2", [1, 2]),
        ("(def x 3) (+ x 4)", [[S("def"), S("x"), 3], [S("+"), S("x"), 4]]),
    ],
)
def test_read(source, expected):
    assert read(source) == expected


def test_string_may_span_lines():
    assert read('"line one\nline two"') == ["line one\nline two"]


def test_symbols_and_keywords_are_distinct():
    sym, kw = read("name :name")
    assert isinstance(sym, Symbol)
    assert isinstance(kw, Keyword)
    assert sym != kw
    assert sym.name == kw.name == "name"


def test_symbols_compare_by_name():
    a, b = read("foo foo")
    assert a == b
    assert hash(a) == hash(b)


def test_lex_skips_comments():
    assert list(lex("(a ; comment\n b)")) == [
        ("lparen", "("),
        ("symbol", "a"),
        ("symbol", "b"),
        ("rparen", ")"),
    ]


def test_token_stream_parses_lazily():
    stream = TokenStream(lex("1 (2 3) 4"))
    assert stream.parse_expr() == 1
    assert stream.parse_expr() == [2, 3]
    assert list(stream.parse_all()) == [4]


@pytest.mark.parametrize(
    "source",
    [
        "(1 2",
        ")",
        "(a))",
        '"unterminated',
        "'",
        "(quote ')",
    ],
)
def test_malformed_source_raises(source):
    with pytest.raises(SproutSyntaxError):
        read(source)


def test_read_fails_before_returning_any_form():
    # The well-formed prefix is not returned on its own
    with pytest.raises(SproutSyntaxError):
        read("(def ok 1) (broken")
