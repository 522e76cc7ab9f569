"""Argument checks shared by the builtins.

Each check raises a LispyError subclass; the application engine turns it into
an Error value, so a failed precondition never aborts evaluation.
"""

from __future__ import annotations

from lispy.errors import LispyArityError, LispyTypeError, LispyValueError
from lispy.types import ExprList, ListValue, type_name


def assert_arity(name: str, args: ExprList, expected: int) -> None:
    if len(args) != expected:
        raise LispyArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {expected}."
        )


def assert_min_arity(name: str, args: ExprList, expected: int) -> None:
    if len(args) < expected:
        raise LispyArityError(
            f"Function '{name}' passed too few arguments. "
            f"Got {len(args)}, Expected at least {expected}."
        )


def assert_type(name: str, args: ExprList, index: int, expected: type) -> None:
    value = args[index]
    if not isinstance(value, expected):
        raise LispyTypeError(
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Got {type_name(value)}, Expected {expected.type_name}."
        )


def assert_all_type(name: str, args: ExprList, expected: type) -> None:
    for i in range(len(args)):
        assert_type(name, args, i, expected)


def assert_not_empty(name: str, args: ExprList, index: int) -> None:
    value = args[index]
    if isinstance(value, ListValue) and len(value) == 0:
        raise LispyValueError(f"Function '{name}' passed {{}}!")
