"""Exceptions raised by :mod:`fixedfrac`.

Each error also derives from the builtin exception Python code would expect
for the same condition, so ``except ZeroDivisionError`` keeps working.
"""


class FractionError(Exception):
    """Base class for every error raised by the package."""


class InvalidFractionError(FractionError, ValueError):
    """A fraction cannot be built from the given components."""


class FractionZeroDivisionError(FractionError, ZeroDivisionError):
    """Division by a fraction equal to zero, or a zero denominator read from text."""


class FractionOverflowError(FractionError, OverflowError):
    """An intermediate product, sum or difference left the int32 range."""


class FractionFormatError(FractionError, ValueError):
    """Text input does not follow the ``<integer>/<integer>`` format."""


__all__ = [
    "FractionError",
    "InvalidFractionError",
    "FractionZeroDivisionError",
    "FractionOverflowError",
    "FractionFormatError",
]
