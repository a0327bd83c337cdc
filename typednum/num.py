"""A number whose value is fixed and checked whenever one is read back."""

from __future__ import annotations

from dataclasses import dataclass

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class NumMismatchError(ValueError):
    """Raised when a value read back is not the expected number."""

    def __init__(self, expected: int) -> None:
        super().__init__(f"not {expected}")
        self.expected = expected


@dataclass(frozen=True)
class Num:
    """A signed 64-bit constant that only ever equals itself."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"expected an int, got {type(self.value).__name__}")
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError(f"{self.value} is outside the signed 64-bit range")

    def check(self, value: int) -> Num:
        """Return this number if ``value`` equals it, else raise NumMismatchError."""
        if isinstance(value, bool) or value != self.value:
            raise NumMismatchError(self.value)
        return self

    def __int__(self) -> int:
        return self.value