from __future__ import annotations

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def in_i64_range(n: int) -> bool:
    return I64_MIN <= n <= I64_MAX


class Number:
    """Signed 64-bit integer value. Immutable."""

    __slots__ = ("value",)

    type_name = "Number"

    def __init__(self, value: int):
        if not in_i64_range(value):
            raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
        self.value = value

    def copy(self) -> Number:
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value})"

    def __str__(self):
        return str(self.value)
