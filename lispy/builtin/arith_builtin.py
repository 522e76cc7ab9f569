"""Integer arithmetic builtins.

All operators fold strictly left to right from the first argument. Numbers
are signed 64-bit; a result outside that range is reported as an Error rather
than wrapped.
"""

from __future__ import annotations

import math
from typing import Callable

from lispy import LispValue
from lispy.builtin.assertions import assert_all_type
from lispy.errors import LispyArityError, LispyValueError
from lispy.types import Environment, ExprList, Number, in_i64_range

# Result of folding an operator over no arguments
IDENTITIES = {"+": 0, "*": 1}


def _checked(n: int) -> int:
    if not in_i64_range(n):
        raise LispyValueError("Integer overflow")
    return n


def _trunc_div(x: int, y: int) -> int:
    """Integer division rounding toward zero."""
    if y == 0:
        raise LispyValueError("Division by zero")
    q = abs(x) // abs(y)
    return q if (x >= 0) == (y >= 0) else -q


def _remainder(x: int, y: int) -> int:
    """Remainder whose sign follows the dividend."""
    if y == 0:
        raise LispyValueError("Division by zero")
    return x - y * _trunc_div(x, y)


def _power(x: int, y: int) -> int:
    try:
        result = float(x) ** float(y)
    except ZeroDivisionError:
        raise LispyValueError("Division by zero")
    except OverflowError:
        raise LispyValueError("Integer overflow")
    if math.isinf(result):
        raise LispyValueError("Integer overflow")
    return int(result)


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": _trunc_div,
    "%": _remainder,
    "^": _power,
}


def arith(name: str, args: ExprList) -> LispValue:
    """Fold the operator `name` over the Number arguments."""
    assert_all_type(name, args, Number)
    if not len(args):
        if name in IDENTITIES:
            return Number(IDENTITIES[name])
        raise LispyArityError(f"Function '{name}' passed no arguments!")

    op = OPERATORS[name]
    x = args.pop(0).value
    if name == "-" and not len(args):
        return Number(_checked(-x))
    while len(args):
        x = _checked(op(x, args.pop(0).value))
    return Number(x)


def add(env: Environment, args: ExprList) -> LispValue:
    return arith("+", args)


def sub(env: Environment, args: ExprList) -> LispValue:
    return arith("-", args)


def mul(env: Environment, args: ExprList) -> LispValue:
    return arith("*", args)


def div(env: Environment, args: ExprList) -> LispValue:
    return arith("/", args)


def mod(env: Environment, args: ExprList) -> LispValue:
    return arith("%", args)


def power(env: Environment, args: ExprList) -> LispValue:
    return arith("^", args)
