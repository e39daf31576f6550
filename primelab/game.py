"""Greedy two-player game taking prefixes of a number sequence."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import accumulate


def play(sequence: Sequence[int], max_take: int) -> tuple[int, int]:
    """Play the game and return the totals of the first and second player.

    On each turn the player takes between 1 and ``max_take`` leading elements,
    choosing the shortest prefix with the largest sum.
    """
    if max_take < 1:
        raise ValueError("max_take must be at least 1")
    totals = [0, 0]
    index = 0
    turn = 0
    while index < len(sequence):
        window = sequence[index : index + max_take]
        take, best = max(enumerate(accumulate(window), 1), key=lambda item: item[1])
        totals[turn] += best
        index += take
        turn ^= 1
    return totals[0], totals[1]


def main(argv: list[str] | None = None) -> int:
    """Read n, m and the sequence from stdin; print 1 if the first player wins."""
    parser = argparse.ArgumentParser(
        description="Read n, m and n numbers from stdin; print 1 if the first player wins."
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        values = [int(token) for token in tokens]
    except ValueError:
        print("Invalid input")
        return 1

    if not values or not 4 <= values[0] <= 50001:
        print("Invalid input")
        return 1
    n = values[0]
    if len(values) < 2 or not 3 <= values[1] <= 101:
        print("Invalid input")
        return 1
    m = values[1]
    if m >= n:
        print("The number of elements taken must be smaller than the sequence length")
        return 1
    sequence = values[2 : 2 + n]
    if len(sequence) < n:
        print("Invalid input")
        return 1

    first, second = play(sequence, m)
    print("1" if first > second else "0")
    return 0