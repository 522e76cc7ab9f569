"""Value model for Lispy.

Every runtime datum is one of the classes below; `Value` is their closed union.
"""

from typing import Union

from lispy.types.symbol import Symbol
from lispy.types.number import Number, I64_MIN, I64_MAX, in_i64_range
from lispy.types.error import Error
from lispy.types.sexpr import ListValue, ExprList, QuoteList
from lispy.types.builtin_fn import Builtin, BuiltinFn
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda, FixedParam, RestParam, Param, parse_formals

Value = Union[Number, Symbol, Error, Builtin, Lambda, ExprList, QuoteList]


def type_name(value: Value) -> str:
    return value.type_name


def is_function(value: Value) -> bool:
    return isinstance(value, (Builtin, Lambda))


__all__ = [
    "Symbol",
    "Number",
    "I64_MIN",
    "I64_MAX",
    "in_i64_range",
    "Error",
    "ListValue",
    "ExprList",
    "QuoteList",
    "Builtin",
    "BuiltinFn",
    "Environment",
    "Lambda",
    "FixedParam",
    "RestParam",
    "Param",
    "parse_formals",
    "Value",
    "type_name",
    "is_function",
]
