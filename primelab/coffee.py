"""Newton's law of cooling simulated by Euler steps, with a least-squares line fit."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def simulate_cooling(
    initial: float,
    ambient: float,
    rate: float,
    duration: float = 30.0,
    step: float = 0.1,
) -> list[tuple[float, float]]:
    """Return ``(time, temperature)`` points from 0 to ``duration``."""
    if step <= 0:
        raise ValueError("step must be positive")
    points: list[tuple[float, float]] = []
    t = 0.0
    temperature = initial
    while t <= duration:
        points.append((t, temperature))
        temperature += -rate * (temperature - ambient) * step
        t += step
    return points


def fit_line(points: Sequence[tuple[float, float]]) -> tuple[float, float]:
    """Least-squares line ``y = a * x + b`` through ``points``; returns ``(a, b)``."""
    n = len(points)
    if n < 2:
        raise ValueError("at least two points are needed")
    sum_x = sum(x for x, _ in points)
    sum_y = sum(y for _, y in points)
    sum_xy = sum(x * y for x, y in points)
    sum_x2 = sum(x * x for x, _ in points)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise ValueError("all points share the same x")
    a = (n * sum_xy - sum_x * sum_y) / denominator
    b = (sum_y - a * sum_x) / n
    return a, b


def _ask(prompt: str) -> float:
    return float(input(prompt))


def main(argv: list[str] | None = None) -> int:
    """Simulate a cooling coffee cup and print the table and fitted line."""
    parser = argparse.ArgumentParser(description="Coffee cooling simulation.")
    parser.add_argument("initial", type=float, nargs="?")
    parser.add_argument("ambient", type=float, nargs="?")
    parser.add_argument("rate", type=float, nargs="?")
    parser.add_argument("--duration", type=float, default=30.0)
    parser.add_argument("--step", type=float, default=0.1)
    args = parser.parse_args(argv)

    initial = args.initial if args.initial is not None else _ask(
        "Initial coffee temperature (T): "
    )
    if initial > 100 or initial < 0:
        print("Your coffee is VERY strange")
        return 1
    ambient = args.ambient if args.ambient is not None else _ask(
        "Ambient temperature (Ts): "
    )
    if initial == ambient:
        print("Nothing will happen to the coffee")
        return 1
    rate = args.rate if args.rate is not None else _ask("Cooling coefficient (r): ")

    try:
        points = simulate_cooling(initial, ambient, rate, args.duration, args.step)
        a, b = fit_line(points)
    except ValueError as exc:
        print(exc)
        return 1

    print("\nCoffee cooling simulation results:")
    print("Time(x)\tTemperature(y)")
    for t, temperature in points:
        print(f"{t:.2f}\t\t{temperature:.2f}")
    print("\nParameters of the fitted line:")
    print(f"a = {a:.2f}")
    print(f"b = {b:.2f}")
    return 0