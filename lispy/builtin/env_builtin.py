"""Built-in functions for the Lispy runtime environment.

This module defines the environment and function builtins (def, =, \\, eval)
and `register`, which installs the whole builtin catalogue into an
environment.
"""

from __future__ import annotations

import logging
from lispy import LispValue
from lispy.builtin.arith_builtin import add, sub, mul, div, mod, power
from lispy.builtin.assertions import assert_arity, assert_min_arity, assert_type
from lispy.builtin.list_builtin import cons, head, init, join, length, list_builtin, tail
from lispy.errors import LispyArityError, LispyTypeError
from lispy.evaluation.evaluator import evaluate
from lispy.types import (
    BuiltinFn,
    Environment,
    Error,
    ExprList,
    Lambda,
    QuoteList,
    Symbol,
    parse_formals,
)

logger = logging.getLogger(__name__)


def _assert_symbols(name: str, xs: QuoteList) -> None:
    for x in xs:
        if not isinstance(x, Symbol):
            raise LispyTypeError(
                f"Function '{name}' cannot define non-symbol. "
                f"Got {x.type_name}, Expected Symbol."
            )


def _bind(name: str, args: ExprList, frame: Environment) -> LispValue:
    assert_min_arity(name, args, 1)
    assert_type(name, args, 0, QuoteList)
    symbols = args.pop(0)
    _assert_symbols(name, symbols)
    if len(symbols) != len(args):
        raise LispyArityError(
            f"Function '{name}' passed incorrect number of values for symbols. "
            f"Got {len(args)}, Expected {len(symbols)}."
        )
    frame.update(dict(zip(symbols, args)))
    return ExprList()


def define(env: Environment, args: ExprList) -> LispValue:
    """(def {a b} 1 2) binds in the global frame."""
    return _bind("def", args, env.root())


def put(env: Environment, args: ExprList) -> LispValue:
    """(= {a b} 1 2) binds in the current local frame."""
    return _bind("=", args, env)


def lambda_builtin(env: Environment, args: ExprList) -> LispValue:
    """(\\ {params} {body}) constructs a closure with an empty private frame."""
    assert_arity("\\", args, 2)
    assert_type("\\", args, 0, QuoteList)
    assert_type("\\", args, 1, QuoteList)
    formals = args.pop(0)
    body = args.pop(0)
    _assert_symbols("\\", formals)
    params = parse_formals(formals)
    if isinstance(params, Error):
        return params
    return Lambda(params, body)


def eval_builtin(env: Environment, args: ExprList) -> LispValue:
    """(eval {+ 1 2}) evaluates a Q-expression as an S-expression."""
    assert_arity("eval", args, 1)
    assert_type("eval", args, 0, QuoteList)
    quoted = args.take(0)
    return evaluate(env, ExprList(quoted.cells))


BUILTINS: dict[str, BuiltinFn] = {
    # List functions
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "init": init,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "len": length,
    # Variable and function definition
    "def": define,
    "=": put,
    "\\": lambda_builtin,
    # Arithmetic
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "^": power,
    "add": add,
    "sub": sub,
    "mul": mul,
    "div": div,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the root of the given environment."""
    for name, fn in BUILTINS.items():
        env.define_builtin(name, fn)
    logger.debug("registered %d builtins", len(BUILTINS))
