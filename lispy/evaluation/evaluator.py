"""Core evaluator for the Lispy interpreter.

Strict, structurally recursive reduction of a value to normal form. Symbols
are looked up, S-expressions have their children reduced first and are then
applied, and every other value is already normal.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types import Environment, Error, ExprList, Symbol, is_function


def evaluate(env: Environment, value: LispValue) -> LispValue:
    """Reduce `value` under `env`."""
    match value:
        case Symbol():
            return env.get(value)
        case ExprList():
            return evaluate_sexpr(env, value)
    # --- Numbers, errors, functions and Q-expressions return as-is ---
    return value


def evaluate_sexpr(env: Environment, sexpr: ExprList) -> LispValue:
    # Evaluate every child before looking at any result.
    sexpr.cells = [evaluate(env, cell) for cell in sexpr.cells]

    for cell in sexpr.cells:
        if isinstance(cell, Error):
            return cell

    if len(sexpr) == 0:
        return sexpr
    if len(sexpr) == 1:
        return sexpr.take(0)

    head = sexpr.pop(0)
    if not is_function(head):
        return Error("S-expression doesn't begin with a function")

    from lispy.evaluation.apply import apply

    return apply(env, head, sexpr)
