"""List builtins: construction and manipulation of Q-expressions.

Every builtin owns its argument list and returns either a fresh result or one
of its own arguments edited in place.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.builtin.assertions import (
    assert_all_type,
    assert_arity,
    assert_min_arity,
    assert_not_empty,
    assert_type,
)
from lispy.types import Environment, ExprList, Number, QuoteList


def _single_list(name: str, args: ExprList, non_empty: bool = True) -> QuoteList:
    assert_arity(name, args, 1)
    assert_type(name, args, 0, QuoteList)
    if non_empty:
        assert_not_empty(name, args, 0)
    return args.take(0)


def list_builtin(env: Environment, args: ExprList) -> LispValue:
    """(list a b ...) -> {a b ...}"""
    return QuoteList(args.cells)


def head(env: Environment, args: ExprList) -> LispValue:
    """(head {a b c}) -> {a}"""
    xs = _single_list("head", args)
    del xs.cells[1:]
    return xs


def tail(env: Environment, args: ExprList) -> LispValue:
    """(tail {a b c}) -> {b c}"""
    xs = _single_list("tail", args)
    xs.pop(0)
    return xs


def init(env: Environment, args: ExprList) -> LispValue:
    """(init {a b c}) -> {a b}"""
    xs = _single_list("init", args)
    xs.pop(-1)
    return xs


def join(env: Environment, args: ExprList) -> LispValue:
    """Concatenate Q-expressions left to right."""
    assert_min_arity("join", args, 1)
    assert_all_type("join", args, QuoteList)
    result = args.pop(0)
    while len(args):
        result.extend(args.pop(0))
    return result


def cons(env: Environment, args: ExprList) -> LispValue:
    """(cons a {b c}) -> {a b c}"""
    assert_arity("cons", args, 2)
    assert_type("cons", args, 1, QuoteList)
    value = args.pop(0)
    xs = args.pop(0)
    xs.cells.insert(0, value)
    return xs


def length(env: Environment, args: ExprList) -> LispValue:
    xs = _single_list("len", args, non_empty=False)
    return Number(len(xs))
