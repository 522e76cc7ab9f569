"""Closure representation and formal-parameter parsing for Lispy.

Formal parameters are parsed into FixedParam/RestParam when `\\` builds the
closure, so a misplaced `&` such as `(\\ {x &} {x})` is an Error right away
rather than when the closure is applied.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Union

from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.sexpr import QuoteList
from lispy.types.symbol import Symbol

REST_MARKER = Symbol("&")

MALFORMED_REST = "Function format invalid: '&' not followed by a single symbol"


class FixedParam:
    """A positional parameter bound to exactly one argument."""

    __slots__ = ("name",)

    def __init__(self, name: Symbol):
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedParam) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("fixed", self.name))

    def __repr__(self):
        return f"FixedParam({self.name.id!r})"

    def __str__(self):
        return self.name.id


class RestParam:
    """A trailing parameter absorbing all remaining arguments as a Q-expression."""

    __slots__ = ("name",)

    def __init__(self, name: Symbol):
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RestParam) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("rest", self.name))

    def __repr__(self):
        return f"RestParam({self.name.id!r})"

    def __str__(self):
        return f"& {self.name.id}"


Param = Union[FixedParam, RestParam]


def parse_formals(symbols: Iterable[Symbol]) -> tuple[Param, ...] | Error:
    """Turn a parameter list such as {x & xs} into Fixed/Rest parameters.

    The `&` marker must be followed by exactly one symbol and nothing else.
    """
    names = list(symbols)
    params: list[Param] = []
    i = 0
    while i < len(names):
        name = names[i]
        if name == REST_MARKER:
            if len(names) - i != 2 or names[i + 1] == REST_MARKER:
                return Error(MALFORMED_REST)
            params.append(RestParam(names[i + 1]))
            break
        params.append(FixedParam(name))
        i += 1
    return tuple(params)


class Lambda:
    """A user-defined closure: formal parameters, a body and a private frame.

    The frame starts empty and is filled in as arguments are bound, so a
    partially applied Lambda carries the arguments supplied so far.
    """

    __slots__ = ("params", "body", "env")

    type_name = "Function"

    def __init__(
        self,
        params: tuple[Param, ...],
        body: QuoteList,
        env: Environment | None = None,
    ):
        self.params: tuple[Param, ...] = tuple(params)
        self.body: QuoteList = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    @property
    def arity(self) -> int:
        return len(self.params)

    def copy(self) -> Lambda:
        return Lambda(self.params, self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
            and self.env.vars == other.env.vars
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ {")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write("} ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
