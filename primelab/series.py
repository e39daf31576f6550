"""Closed form of the series sum of n**a / b**n as a decimal fraction."""

from __future__ import annotations

import argparse
import math
from fractions import Fraction

_SCALE = 10


def series_sum(a: int, b: int, rounds: int = 1000) -> float:
    """Partial sum of ``n ** a / b ** n`` for n from 1 to ``rounds``."""
    return sum(n**a / b**n for n in range(1, rounds + 1))


def nod(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    while True:
        if a % b == 0:
            return b
        if b % a == 0:
            return a
        if a > b:
            a %= b
        else:
            b %= a


def approximate_fraction(a: int, b: int) -> Fraction | None:
    """Sum of the series rounded to tenths, or None if it is irrational.

    Raises ValueError when ``a`` or ``b`` is outside 1..10 and OverflowError
    when the series diverges.
    """
    if not (1 <= a <= 10 and 1 <= b <= 10):
        raise ValueError("a and b must be between 1 and 10")
    if b <= 1:
        raise OverflowError("series diverges")
    total = series_sum(a, b)
    numerator = math.floor(total * _SCALE + 0.5)
    divisor = nod(numerator, _SCALE)
    fraction = Fraction(numerator // divisor, _SCALE // divisor)
    if abs(total - float(fraction)) < 1:
        return fraction
    return None


def main(argv: list[str] | None = None) -> int:
    """Read a and b and print the sum as a fraction."""
    parser = argparse.ArgumentParser(description="Sum of n**a / b**n.")
    parser.add_argument("a", type=int, nargs="?")
    parser.add_argument("b", type=int, nargs="?")
    args = parser.parse_args(argv)

    if args.a is None or args.b is None:
        a, b = (int(token) for token in input().split()[:2])
    else:
        a, b = args.a, args.b

    try:
        fraction = approximate_fraction(a, b)
    except ValueError:
        print("Invalid input")
        return 1
    except OverflowError:
        print("infinity")
        return 1

    if fraction is None:
        print("irrational")
    else:
        print(f"{fraction.numerator}/{fraction.denominator}")
    return 0