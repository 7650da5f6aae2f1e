"""Fixed-width rational numbers."""

from .checked import INT_MAX, INT_MIN
from .errors import (
    FractionError,
    FractionFormatError,
    FractionOverflowError,
    FractionZeroDivisionError,
    InvalidFractionError,
)
from .fraction import DEFAULT_TOLERANCE, FLOAT_SCALE, Fraction, rationalize
from .textio import parse_fraction, read_fraction, write_fraction

__version__ = "0.1.0"

__all__ = [
    "Fraction",
    "rationalize",
    "read_fraction",
    "write_fraction",
    "parse_fraction",
    "FractionError",
    "InvalidFractionError",
    "FractionZeroDivisionError",
    "FractionOverflowError",
    "FractionFormatError",
    "INT_MIN",
    "INT_MAX",
    "FLOAT_SCALE",
    "DEFAULT_TOLERANCE",
]
