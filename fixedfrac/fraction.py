"""Fixed-width rational numbers with overflow-checked arithmetic."""
from __future__ import annotations

import fractions
import math
import numbers
import operator
from typing import Any, Optional, Tuple, Union

import numpy as np

from .checked import (
    INT_MAX,
    INT_MIN,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    ensure_in_range,
)
from .errors import (
    FractionOverflowError,
    FractionZeroDivisionError,
    InvalidFractionError,
)

NumberLike = Union["Fraction", numbers.Real]

FLOAT_SCALE = 1000
DEFAULT_TOLERANCE = 0.001


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return ensure_in_range(int(value), name=name)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _float_components(value: numbers.Real) -> Tuple[int, int]:
    """Scale *value* to three decimal digits at single precision."""
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise InvalidFractionError("cannot convert NaN or infinity to Fraction")
    if number == 0:
        return 0, 1
    if not INT_MIN - 1 < number * FLOAT_SCALE < INT_MAX + 1:
        raise FractionOverflowError(f"{value!r} is too large to convert to Fraction")
    scaled = int(np.float32(number) * np.float32(FLOAT_SCALE))
    return ensure_in_range(scaled, name="scaled value"), FLOAT_SCALE


class Fraction:
    """Immutable rational number kept in lowest terms with int32 components.

    ``Fraction()`` is zero, ``Fraction(n, d)`` is ``n/d`` reduced with the
    sign moved to the numerator, and ``Fraction(x)`` for a float ``x``
    approximates it to three decimal digits (see :meth:`from_float`).
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Fraction semantics in NumPy expressions.

    def __init__(
        self,
        numerator: NumberLike = 0,
        denominator: Optional[numbers.Integral] = None,
    ) -> None:
        if denominator is None:
            if isinstance(numerator, numbers.Integral):
                num, den = _ensure_int(numerator, name="numerator"), 1
            elif isinstance(numerator, numbers.Rational):
                num = _ensure_int(numerator.numerator, name="numerator")
                den = _ensure_int(numerator.denominator, name="denominator")
            elif isinstance(numerator, numbers.Real):
                num, den = _float_components(numerator)
            else:
                raise TypeError(f"Cannot interpret {type(numerator)!r} as Fraction")
        else:
            num = _ensure_int(numerator, name="numerator")
            den = _ensure_int(denominator, name="denominator")

        if den == 0:
            raise InvalidFractionError("denominator must be non-zero")

        num, den = self._normalize(num, den)

        self._numerator = ensure_in_range(num, name="numerator")
        self._denominator = ensure_in_range(den, name="denominator")

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_float(cls, value: float) -> "Fraction":
        """Return ``trunc(value * 1000) / 1000`` in lowest terms.

        The value is taken at single precision before scaling, so only three
        decimal digits survive: ``Fraction.from_float(0.1234)`` is ``123/1000``.
        """
        return cls(*_float_components(value))

    @classmethod
    def from_str(cls, text: str) -> "Fraction":
        """Parse ``"<integer>/<integer>"``."""
        from .textio import parse_fraction

        return parse_fraction(text)

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Fraction":
        """Coerce a numeric-like value into :class:`Fraction`."""
        if isinstance(value, Fraction):
            return value
        if isinstance(value, numbers.Rational):
            return cls(value.numerator, value.denominator)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Fraction")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def with_numerator(self, numerator: int) -> "Fraction":
        """Return ``numerator / self.denominator``, normalized."""
        return Fraction(numerator, self._denominator)

    def with_denominator(self, denominator: int) -> "Fraction":
        """Return ``self.numerator / denominator``, normalized."""
        if denominator == 0:
            raise InvalidFractionError("denominator must be non-zero")
        return Fraction(self._numerator, denominator)

    def as_fraction(self) -> fractions.Fraction:
        """Return a :class:`fractions.Fraction` with the same value."""
        return fractions.Fraction(self._numerator, self._denominator)

    def increment(self) -> "Fraction":
        """Return ``self + 1``."""
        return Fraction(checked_add(self._numerator, self._denominator), self._denominator)

    def decrement(self) -> "Fraction":
        """Return ``self - 1``."""
        return Fraction(checked_sub(self._numerator, self._denominator), self._denominator)

    def isclose(self, other: NumberLike, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Compare as floats, equal when the difference is below *tolerance*."""
        other_frac = self._coerce_scalar(other)
        return abs(float(self) - float(other_frac)) < tolerance

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __int__(self) -> int:
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        gcd = math.gcd(num, den)
        new_num = abs(num) // gcd
        new_den = abs(den) // gcd
        if (num < 0) != (den < 0):
            new_num = -new_num
        return new_num, new_den

    def _coerce_scalar(self, value: Any) -> "Fraction":
        if isinstance(value, Fraction):
            return value
        if isinstance(value, numbers.Integral):
            return Fraction(int(value), 1)
        if isinstance(value, numbers.Rational):
            return Fraction(value)
        if isinstance(value, np.generic):  # NumPy scalars
            return self._coerce_scalar(value.item())
        if isinstance(value, numbers.Real):
            return Fraction.from_float(float(value))
        raise TypeError(f"Cannot interpret {type(value)!r} as Fraction")

    def _vectorize_iterable(self, iterable, func):
        return np.array([func(item) for item in iterable], dtype=object)

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(
                other,
                lambda x: op(self, self._coerce_scalar(x)),
            )
        return op(self, self._coerce_scalar(other))

    def _reflected_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(
                other,
                lambda x: op(self._coerce_scalar(x), self),
            )
        return op(self._coerce_scalar(other), self)

    @staticmethod
    def _add(a: "Fraction", b: "Fraction") -> "Fraction":
        num1 = checked_mul(a._numerator, b._denominator)
        num2 = checked_mul(b._numerator, a._denominator)
        den = checked_mul(a._denominator, b._denominator)
        return Fraction(checked_add(num1, num2), den)

    @staticmethod
    def _sub(a: "Fraction", b: "Fraction") -> "Fraction":
        num1 = checked_mul(a._numerator, b._denominator)
        num2 = checked_mul(b._numerator, a._denominator)
        den = checked_mul(a._denominator, b._denominator)
        return Fraction(checked_sub(num1, num2), den)

    @staticmethod
    def _mul(a: "Fraction", b: "Fraction") -> "Fraction":
        return Fraction(
            checked_mul(a._numerator, b._numerator),
            checked_mul(a._denominator, b._denominator),
        )

    @staticmethod
    def _truediv(a: "Fraction", b: "Fraction") -> "Fraction":
        if b._numerator == 0:
            raise FractionZeroDivisionError("division by zero")
        return Fraction(
            checked_mul(a._numerator, b._denominator),
            checked_mul(a._denominator, b._numerator),
        )

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._truediv)

    def __neg__(self) -> "Fraction":
        return Fraction(checked_neg(self._numerator), self._denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        if self._numerator >= 0:
            return self
        return -self

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        other_frac = self._coerce_scalar(other)
        return op(
            self._numerator * other_frac._denominator,
            other_frac._numerator * self._denominator,
        )

    def __eq__(self, other: Any) -> bool:
        try:
            return self._compare(other, operator.eq)
        except TypeError:
            return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __le__(self, other: Any) -> bool:
        return not self.__gt__(other)

    def __ge__(self, other: Any) -> bool:
        return not self.__lt__(other)

    def __hash__(self) -> int:
        """Hash equal to that of an equal ``int`` or ``fractions.Fraction``.

        Floats compare equal after the three-digit conversion, so
        ``Fraction(1, 2) == 0.5004`` holds while the hashes differ. Do not mix
        float and :class:`Fraction` keys in one dict or set.
        """
        return hash(self.as_fraction())


def rationalize(value: NumberLike) -> Fraction:
    """Public helper to convert *value* into :class:`Fraction`."""

    return Fraction.rationalize(value)


__all__ = ["Fraction", "rationalize", "FLOAT_SCALE", "DEFAULT_TOLERANCE"]
