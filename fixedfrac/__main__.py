"""Evaluate a single fraction expression from the command line.

Example::

    python -m fixedfrac 3/4 + 1/4
    python -m fixedfrac 0.5 "<" 2/3
"""

import argparse
import operator
import re
import sys
from typing import Callable, Dict, List, Optional

from .fraction import Fraction
from .textio import parse_fraction

OPERATORS: Dict[str, Callable] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}

NEGATIVE_OPERAND = re.compile(r"^-\d")


def parse_operand(text: str) -> Fraction:
    if "/" in text:
        return parse_fraction(text)
    try:
        return Fraction(int(text))
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"Cannot parse operand {text!r}") from None
    return Fraction.from_float(number)


def evaluate(left: str, op: str, right: str):
    try:
        func = OPERATORS[op]
    except KeyError:
        raise ValueError(f"Unknown operator {op!r}") from None
    return func(parse_operand(left), parse_operand(right))


def main(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    # Operands such as -1/2 would otherwise be read as option flags.
    if "--" not in argv and any(NEGATIVE_OPERAND.match(arg) for arg in argv):
        argv = ["--", *argv]

    parser = argparse.ArgumentParser(
        prog="fixedfrac",
        description="Evaluate LEFT OP RIGHT with fixed-width fractions.",
    )
    parser.add_argument("left", help="Left operand: n/d, an integer or a decimal")
    parser.add_argument("op", choices=sorted(OPERATORS), help="Operator")
    parser.add_argument("right", help="Right operand: n/d, an integer or a decimal")
    args = parser.parse_args(argv)

    print(evaluate(args.left, args.op, args.right))


def run(argv: Optional[List[str]] = None) -> None:
    try:
        main(argv)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
