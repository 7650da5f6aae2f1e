"""Overflow-guarded integer arithmetic for 32-bit fraction components."""
from __future__ import annotations

import numpy as np

from .errors import FractionOverflowError

_INT_INFO = np.iinfo(np.int32)

INT_MIN: int = int(_INT_INFO.min)
INT_MAX: int = int(_INT_INFO.max)


def ensure_in_range(value: int, *, name: str = "value") -> int:
    """Return *value* unchanged, failing when it does not fit in an int32."""
    if value < INT_MIN or value > INT_MAX:
        raise FractionOverflowError(f"{name} {value} is outside the int32 range")
    return value


def checked_mul(a: int, b: int) -> int:
    # A zero factor cannot overflow; otherwise compare before multiplying.
    if a != 0 and b != 0 and abs(a) > INT_MAX // abs(b):
        raise FractionOverflowError(f"multiplying {a} by {b} would overflow int32")
    return a * b


def checked_add(a: int, b: int) -> int:
    if (a > 0 and b > 0 and a > INT_MAX - b) or (a < 0 and b < 0 and a < INT_MIN - b):
        raise FractionOverflowError(f"adding {a} and {b} would overflow int32")
    return a + b


def checked_sub(a: int, b: int) -> int:
    if (a < 0 and b > 0 and a < INT_MIN + b) or (a >= 0 and b < 0 and a > INT_MAX + b):
        raise FractionOverflowError(f"subtracting {b} from {a} would overflow int32")
    return a - b


def checked_neg(a: int) -> int:
    if a == INT_MIN:
        raise FractionOverflowError(f"negating {a} would overflow int32")
    return -a


__all__ = [
    "INT_MIN",
    "INT_MAX",
    "ensure_in_range",
    "checked_mul",
    "checked_add",
    "checked_sub",
    "checked_neg",
]
