"""Runtime environment for Lispy.

An Environment is one frame of bindings from Symbols to values with an
optional `outer` link. Lookups walk the chain from the innermost frame out to
the root (lexical scoping). Values are deep-copied on the way in and on the way
out, so a binding never aliases a value held anywhere else.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from lispy.errors import LispyTypeError
from lispy.types.builtin_fn import Builtin, BuiltinFn
from lispy.types.error import Error
from lispy.types.symbol import Symbol

if TYPE_CHECKING:
    from lispy.types import Value


class Environment:
    """Hierarchical mapping from Symbols to Lispy values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        bindings: Optional[dict[Symbol, Value]] = None,
    ):
        self.vars: dict[Symbol, Value] = bindings if bindings is not None else {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def get(self, name: Symbol) -> Value:
        """Return a copy of the value bound to `name`, or an Error if unbound."""
        env = self.find(name)
        if env is None:
            return Error(f"Symbol '{name.id}' doesn't exist")
        return env.vars[name].copy()

    def put_local(self, name: Symbol, value: Value) -> None:
        """Bind `name` in this frame only."""
        if not isinstance(name, Symbol):
            raise LispyTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value.copy()

    def put_global(self, name: Symbol, value: Value) -> None:
        """Bind `name` in the root frame of this chain."""
        self.root().put_local(name, value)

    def define_builtin(self, name: str, fn: BuiltinFn) -> None:
        self.put_global(Symbol(name), Builtin(name, fn))

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.put_local(k, v)

    def copy(self) -> Environment:
        """Deep-copy this frame's bindings; the outer link is shared."""
        return Environment(self.outer, {k: v.copy() for k, v in self.vars.items()})

    def reparented(self, outer: Optional[Environment]) -> Environment:
        """A view of this frame's bindings that falls back to `outer`.

        Writes through the view land in this frame; this frame's own outer
        link is left untouched.
        """
        return Environment(outer, self.vars)

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        names = " ".join(k.id for k in self.vars)
        return f"<Environment {{{names}}} depth={depth}>"
