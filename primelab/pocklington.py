"""Pocklington's primality test on numbers n = R * F + 1 with known factorization of F."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from primelab.arith import (
    choose_prime,
    decimal_length,
    miller_rabin,
    random_numbers,
    random_of_length,
    sieve,
)


def pocklington_test(
    n: int,
    rounds: int,
    divisors: Sequence[int],
    rng: random.Random | None = None,
) -> bool:
    """Pocklington's test of ``n`` with ``rounds`` random bases.

    ``divisors`` are the distinct primes of the factored part F of ``n - 1``.
    Every divisor needs a base ``a`` with ``a ** ((n - 1) / q) != 1 (mod n)``.
    """
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    bases = random_numbers(rounds, 2, n - 1, rng)
    if any(pow(a, n - 1, n) != 1 for a in bases):
        return False
    for q in divisors:
        if (n - 1) % q:
            return False
        if not any(pow(a, (n - 1) // q, n) != 1 for a in bases):
            return False
    return True


def generate_candidate(
    primes: Sequence[int],
    length: int = 4,
    rng: random.Random | None = None,
) -> tuple[int, list[int]]:
    """Build ``n = R * F + 1`` with exactly ``length`` decimal digits.

    F is a product of random prime powers taking about half of the digits,
    R is a random even number filling the rest. Returns ``n`` and the
    distinct primes of F in the order they were drawn.
    """
    if not primes:
        raise ValueError("prime list is empty")
    if length < 2:
        raise ValueError("length must be at least 2")
    generator = random.Random() if rng is None else rng
    budget = length // 2 + 1

    while True:
        drawn: list[int] = []
        f = 1
        current = 0
        while current < budget:
            prime = choose_prime(primes, generator)
            power = prime ** generator.randint(1, 7)
            if current + decimal_length(power) > budget:
                break
            drawn.append(prime)
            f *= power
            current = decimal_length(f)
        if not drawn:
            continue

        r_length = length - decimal_length(f)
        if r_length <= 0:
            continue
        r = random_of_length(r_length, generator)
        while r % 2:
            r = random_of_length(r_length, generator)

        n = r * f + 1
        if decimal_length(n) == length:
            return n, list(dict.fromkeys(drawn))


def main(argv: list[str] | None = None) -> int:
    """Generate candidates until enough pass Pocklington's test, printing a table."""
    parser = argparse.ArgumentParser(description="Pocklington's primality test.")
    parser.add_argument("--limit", type=int, default=500)
    parser.add_argument("--length", type=int, default=4)
    parser.add_argument("--rounds", type=int, default=50)
    parser.add_argument("--wanted", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    primes = sieve(args.limit)
    if not primes:
        parser.error("sieve limit yields no primes")
    if args.length < 2:
        parser.error("length must be at least 2")

    print("Sieve of Eratosthenes:")
    print(" ".join(map(str, primes)))
    print()
    print("=" * 67)
    print(f"{'№':>5} | {'p':>12} | {'Test':>7} | {'k':>5}")
    print("-" * 67)

    accepted = 0
    rejected = 0
    attempt = 0
    while accepted < args.wanted:
        attempt += 1
        n, divisors = generate_candidate(primes, args.length, rng)
        probable = miller_rabin(n, args.rounds, rng)
        proven = pocklington_test(n, args.rounds, divisors, rng)
        if probable and not proven:
            rejected += 1
        if probable and proven:
            accepted += 1
        mark = "+" if probable else "-"
        print(f"{attempt:>5} | {n:>12} | {mark:>7} | {rejected:>5}")
    print()
    return 0