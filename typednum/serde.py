"""Conversion of fixed numbers to and from plain data values."""

from __future__ import annotations

from typing import Any

from typednum.num import Num


def serialize(num: Num) -> int:
    """Return the plain integer that stands for ``num``."""
    return num.value


def deserialize(num: Num, value: Any) -> Num:
    """Return ``num`` if ``value`` is the integer it stands for.

    Raises TypeError for a value that is not an integer and
    NumMismatchError for an integer that is a different number.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"invalid type: {type(value).__name__}, expected {num.value}")
    return num.check(value)