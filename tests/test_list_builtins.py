import pytest

from lispy.types import Error, ExprList, Number, QuoteList, Symbol


def q(*items):
    return QuoteList([Number(i) if isinstance(i, int) else i for i in items])


@pytest.mark.parametrize(
    "source,expected",
    [
        ("list 1 2 3", q(1, 2, 3)),
        ("list (+ 1 1) x", None),
        ("head {1 2 3}", q(1)),
        ("tail {1 2 3}", q(2, 3)),
        ("tail {1}", q()),
        ("init {1 2 3}", q(1, 2)),
        ("join {1} {2 3} {}", q(1, 2, 3)),
        ("join {1}", q(1)),
        ("cons 1 {2 3}", q(1, 2, 3)),
        ("cons {1} {2}", q(q(1), 2)),
        ("cons 1 {}", q(1)),
        ("len {1 2 3}", Number(3)),
        ("len {}", Number(0)),
        ("eval {+ 1 2}", Number(3)),
        ("eval {}", ExprList()),
        ("head {x y}", q(Symbol("x"))),
    ]
)
def test_list_builtins(run, source, expected):
    if expected is None:
        # errors in arguments short-circuit before list is applied
        assert run(source) == Error("Symbol 'x' doesn't exist")
    else:
        assert run(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("head {}", "Function 'head' passed {}!"),
        ("tail {}", "Function 'tail' passed {}!"),
        ("init {}", "Function 'init' passed {}!"),
        ("head 1", "Function 'head' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("head {1} {2}", "Function 'head' passed incorrect number of arguments. Got 2, Expected 1."),
        ("len 1 2", "Function 'len' passed incorrect number of arguments. Got 2, Expected 1."),
        ("len +", "Function 'len' passed incorrect type for argument 0. Got Function, Expected Q-Expression."),
        ("join {1} 2", "Function 'join' passed incorrect type for argument 1. Got Number, Expected Q-Expression."),
        ("cons 1 2", "Function 'cons' passed incorrect type for argument 1. Got Number, Expected Q-Expression."),
        ("cons 1", "Function 'cons' passed incorrect number of arguments. Got 1, Expected 2."),
        ("eval 1", "Function 'eval' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("eval {1} {2}", "Function 'eval' passed incorrect number of arguments. Got 2, Expected 1."),
    ]
)
def test_list_builtin_errors(run, source, message):
    assert run(source) == Error(message)


def test_eval_uses_current_environment(run):
    run("def {x} 10")
    assert run("eval {+ x 1}") == Number(11)


def test_head_result_does_not_alias_source(run):
    run("def {xs} {1 2 3}")
    first = run("head xs")
    first.append(Number(99))
    first.cells[0] = Number(-1)
    assert run("xs") == q(1, 2, 3)
    run("def {h} (head xs)")
    assert run("xs") == q(1, 2, 3)
    assert run("h") == q(1)


def test_join_keeps_nested_lists(run):
    assert run("join {{1}} {{2 3}}") == q(q(1), q(2, 3))


def test_def_binds_several_symbols(run):
    assert run("def {a b c} 1 2 3") == ExprList()
    assert run("list a b c") == q(1, 2, 3)


@pytest.mark.parametrize(
    "source,message",
    [
        ("def {a b} 1", "Function 'def' passed incorrect number of values for symbols. Got 1, Expected 2."),
        ("def {a} 1 2", "Function 'def' passed incorrect number of values for symbols. Got 2, Expected 1."),
        ("def {1} 1", "Function 'def' cannot define non-symbol. Got Number, Expected Symbol."),
        ("def 1 1", "Function 'def' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("= {a} 1 2", "Function '=' passed incorrect number of values for symbols. Got 2, Expected 1."),
    ]
)
def test_def_errors(run, source, message):
    assert run(source) == Error(message)


def test_def_quoted_symbol_list(run):
    run("def {arglist} {a b}")
    run("def arglist 1 2")
    assert run("+ a b") == Number(3)


def test_def_writes_global_frame_and_put_local_frame(env):
    from lispy.builtin.env_builtin import define, put
    from lispy.types import Environment

    local = Environment(outer=env)
    assert define(local, ExprList([QuoteList([Symbol("g")]), Number(1)])) == ExprList()
    assert put(local, ExprList([QuoteList([Symbol("l")]), Number(2)])) == ExprList()
    assert Symbol("g") in env.vars and Symbol("g") not in local.vars
    assert Symbol("l") in local.vars and Symbol("l") not in env.vars


def test_def_repeated_symbol_keeps_last_value(run):
    run("def {a a} 1 2")
    assert run("a") == Number(2)
