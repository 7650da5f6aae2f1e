"""Reading and writing fractions in the ``<integer>/<integer>`` text format."""
from __future__ import annotations

import io
import string
from typing import Optional, TextIO

from .errors import FractionFormatError, FractionZeroDivisionError
from .fraction import Fraction


def _is_digit(char: str) -> bool:
    return len(char) == 1 and char in string.digits


class _CharReader:
    """One-character lookahead over a text stream.

    On seekable streams the lookahead character is pushed back by
    :meth:`release`; on other streams it is consumed.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._seekable = stream.seekable()
        self._pending: Optional[str] = None
        self._mark = None

    def peek(self) -> str:
        if self._pending is None:
            if self._seekable:
                self._mark = self._stream.tell()
            self._pending = self._stream.read(1)
        return self._pending

    def next(self) -> str:
        char = self.peek()
        self._pending = None
        return char

    def skip_whitespace(self) -> None:
        while self.peek().isspace():
            self.next()

    def read_integer(self, name: str) -> int:
        self.skip_whitespace()
        token = ""
        if self.peek() in ("+", "-"):
            token += self.next()
        while _is_digit(self.peek()):
            token += self.next()
        if not token or token in ("+", "-"):
            raise FractionFormatError(f"expected an integer {name}, got {self.peek()!r}")
        return int(token)

    def release(self) -> None:
        if self._pending and self._seekable:
            self._stream.seek(self._mark)
        self._pending = None


def read_fraction(stream: TextIO) -> Fraction:
    """Read one fraction from *stream*.

    Leading whitespace is skipped and any single character separates the
    numerator from the denominator. The result is normalized, so reading
    ``"6/-8"`` gives ``-3/4``.
    """
    reader = _CharReader(stream)
    numerator = reader.read_integer("numerator")
    if reader.peek() == ".":
        raise FractionFormatError("floating-point input is not accepted")
    if not reader.next():
        raise FractionFormatError("missing separator after numerator")
    denominator = reader.read_integer("denominator")
    reader.release()
    if denominator == 0:
        raise FractionZeroDivisionError("denominator cannot be zero")
    return Fraction(numerator, denominator)


def write_fraction(stream: TextIO, fraction: Fraction) -> None:
    """Write *fraction* to *stream* as ``numerator/denominator``."""
    stream.write(str(fraction))


def parse_fraction(text: str) -> Fraction:
    """Parse a whole string holding exactly one fraction."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text)!r}")
    stream = io.StringIO(text)
    fraction = read_fraction(stream)
    rest = stream.read()
    if rest.strip():
        raise FractionFormatError(f"unexpected trailing text {rest.strip()!r}")
    return fraction


__all__ = ["read_fraction", "write_fraction", "parse_fraction"]
