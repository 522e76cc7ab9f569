from __future__ import annotations

from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from lispy.types.environment import Environment
    from lispy.types.sexpr import ExprList

# Builtin signature: (env, evaluated args) -> value
BuiltinFn = Callable[["Environment", "ExprList"], object]


class Builtin:
    """A native primitive, identified by the name it was registered under."""

    __slots__ = ("name", "fn")

    type_name = "Function"

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def copy(self) -> Builtin:
        return self

    def __call__(self, env: Environment, args: ExprList):
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __str__(self) -> str:
        return "<builtin>"

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
