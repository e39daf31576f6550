"""Tabulation of a piecewise function over a range of x."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator

LOWER_BOUND = -4.0


def chart(x: float) -> float:
    """Value of the piecewise function at ``x``.

    A half circle on [-4, 0], zero on (0, 0.5), ln(x)/x on [0.5, 2] and 1 above 2.
    Left of -4 the function is zero.
    """
    if -4 <= x <= 0:
        return math.sqrt(4 - (x + 2) ** 2)
    if 0 < x < 0.5:
        return 0.0
    if 0.5 <= x <= 2:
        return math.log(x) / x
    if x > 2:
        return 1.0
    return 0.0


def _steps(start: float, end: float, step: float) -> Iterator[tuple[float, float]]:
    x = start
    if start < end:
        while x <= end:
            yield x, chart(x)
            x += step
    elif start > end:
        while x >= end:
            yield x, chart(x)
            x += step


def walk(start: float, end: float, step: float) -> Iterator[tuple[float, float]]:
    """Yield ``(x, chart(x))`` from ``start`` towards ``end`` by ``step``.

    Raises ValueError for ranges left of the chart or a step pointing the wrong way.
    """
    if start < LOWER_BOUND or end < LOWER_BOUND:
        raise ValueError("Out of chart bounds")
    if (start < end and step < 0) or (start > end and step > 0):
        raise ValueError("Impossible walk along the chart")
    if start != end and step == 0:
        raise ValueError("Step must not be zero")
    return _steps(start, end, step)


def _ask(prompt: str) -> float:
    return float(input(prompt))


def main(argv: list[str] | None = None) -> int:
    """Print a table of the function over the requested range."""
    parser = argparse.ArgumentParser(description="Tabulate a piecewise function.")
    parser.add_argument("start", type=float, nargs="?")
    parser.add_argument("end", type=float, nargs="?")
    parser.add_argument("step", type=float, nargs="?")
    args = parser.parse_args(argv)

    start = args.start if args.start is not None else _ask("Start of the walk: ")
    end = args.end if args.end is not None else _ask("End of the walk: ")
    step = (
        args.step
        if args.step is not None
        else _ask("Signed step (+ = ascending, - = descending): ")
    )

    try:
        rows = walk(start, end, step)
    except ValueError as exc:
        print(exc)
        return 0

    print("---------------")
    print("|   x  |   y  |")
    print("---------------")
    for x, y in rows:
        print(f"| {x:3.5f} | {y:3.5f} |")
    print("-----------------")
    return 0