from __future__ import annotations


class Error:
    """A first-class failure value. Propagates through evaluation unchanged."""

    __slots__ = ("message",)

    type_name = "Error"

    def __init__(self, message: str):
        self.message = message

    def copy(self) -> Error:
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("error", self.message))

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return f"Error: {self.message}"
