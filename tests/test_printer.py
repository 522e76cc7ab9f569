import pytest

from lispy.types import Error, ExprList, Number, QuoteList, Symbol


@pytest.mark.parametrize(
    "value,text",
    [
        (Number(-3), "-3"),
        (Symbol("head"), "head"),
        (Error("Division by zero"), "Error: Division by zero"),
        (ExprList(), "()"),
        (QuoteList(), "{}"),
        (ExprList([Symbol("+"), Number(1), QuoteList([Number(2), Number(3)])]), "(+ 1 {2 3})"),
    ]
)
def test_value_str(value, text):
    assert str(value) == text


@pytest.mark.parametrize(
    "source,text",
    [
        ("+ 1 2", "3"),
        ("+", "<builtin>"),
        ("list 1 (list 2 3)", "{1 {2 3}}"),
        ("def {x} 1", "()"),
        ("{+ (x) {y}}", "{+ (x) {y}}"),
        (r"\ {x & xs} {+ x 1}", r"(\ {x & xs} {+ x 1})"),
        (r"(\ {a b c} {a}) 1", r"(\ {b c} {a})"),
        ("head {}", "Error: Function 'head' passed {}!"),
        ("nope", "Error: Symbol 'nope' doesn't exist"),
    ]
)
def test_printed_results(interp, source, text):
    assert str(interp.eval(source)) == text


def test_type_names():
    assert [v.type_name for v in (Number(1), Symbol("a"), Error("e"), ExprList(), QuoteList())] == [
        "Number", "Symbol", "Error", "S-Expression", "Q-Expression",
    ]
