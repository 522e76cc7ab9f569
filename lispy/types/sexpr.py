"""Container values: evaluable S-expressions and literal Q-expressions.

Both kinds own their cells exclusively. `copy()` is always deep, so two
containers never share an element slot.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator


class ListValue:
    __slots__ = ("cells",)

    type_name = "List"
    open_delim = "("
    close_delim = ")"

    def __init__(self, cells: Iterable | None = None):
        self.cells: list = list(cells) if cells is not None else []

    def copy(self):
        return type(self)(c.copy() for c in self.cells)

    # --- in-place editing, used by builtins on their owned arguments ---
    def pop(self, index: int = 0):
        return self.cells.pop(index)

    def take(self, index: int):
        """Return the cell at `index`, discarding the rest of the container."""
        cell = self.cells[index]
        self.cells = []
        return cell

    def append(self, value) -> None:
        self.cells.append(value)

    def extend(self, other: ListValue) -> None:
        self.cells.extend(other.cells)
        other.cells = []

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator:
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.cells == other.cells

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.open_delim)
            buffer.write(" ".join(str(c) for c in self.cells))
            buffer.write(self.close_delim)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class ExprList(ListValue):
    """S-expression: evaluating it applies its head to its tail."""

    __slots__ = ()

    type_name = "S-Expression"


class QuoteList(ListValue):
    """Q-expression: literal data, evaluates to itself."""

    __slots__ = ()

    type_name = "Q-Expression"
    open_delim = "{"
    close_delim = "}"
