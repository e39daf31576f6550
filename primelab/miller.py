"""Miller's primality test on numbers n = 2m + 1 with known factorization of m."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from primelab.arith import choose_prime, decimal_length, miller_rabin, random_numbers, sieve


def miller_test(
    n: int,
    rounds: int,
    divisors: Sequence[int],
    rng: random.Random | None = None,
) -> bool:
    """Miller's test of ``n`` with ``rounds`` random bases and prime divisors of n - 1."""
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
        if (n - 1) % q or all(pow(a, (n - 1) // q, n) == 1 for a in bases):
            return False
    return True


def generate_candidate(
    primes: Sequence[int],
    min_length: int = 3,
    max_length: int = 4,
    rng: random.Random | None = None,
) -> tuple[int, list[int]]:
    """Build ``n = 2m + 1`` from random prime powers.

    Returns ``n`` and the primes of ``m`` repeated by multiplicity.
    """
    if not primes:
        raise ValueError("prime list is empty")
    generator = random.Random() if rng is None else rng

    def draw() -> tuple[int, int]:
        return choose_prime(primes, generator), generator.randint(1, 7)

    factors: list[tuple[int, int]] = []
    m = 1
    while decimal_length(m) < min_length:
        prime, exponent = draw()
        factors.append((prime, exponent))
        m *= prime**exponent

    while decimal_length(m) > max_length - 1 and m > 1:
        last_prime, last_exponent = factors.pop()
        m //= last_prime**last_exponent
        prime, exponent = draw()
        factors.append((prime, exponent))
        m *= prime**exponent
        if decimal_length(m) < min_length:
            factors.append((last_prime, last_exponent))
            m *= last_prime**last_exponent

    n = 2 * m + 1
    if decimal_length(n) < max_length:
        prime, exponent = draw()
        factors.append((prime, exponent))
        m *= prime**exponent
        n = 2 * m + 1

    while decimal_length(n) > max_length + 1:
        last_prime, last_exponent = factors.pop()
        m //= last_prime**last_exponent
        prime, exponent = draw()
        factors.append((prime, exponent))
        m *= prime**exponent
        n = 2 * m + 1

    divisors = [prime for prime, exponent in factors for _ in range(exponent)]
    return n, divisors


def main(argv: list[str] | None = None) -> int:
    """Generate candidates until enough pass Miller's test, printing a table."""
    parser = argparse.ArgumentParser(description="Miller's primality test.")
    parser.add_argument("--limit", type=int, default=500)
    parser.add_argument("--rounds", type=int, default=50)
    parser.add_argument("--min-length", type=int, default=3)
    parser.add_argument("--max-length", type=int, default=4)
    parser.add_argument("--wanted", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    primes = sieve(args.limit)
    if not primes:
        parser.error("sieve limit yields no primes")

    print("Sieve of Eratosthenes:")
    print(" ".join(map(str, primes)))

    rule = "-" * 49
    print(rule)
    print("|  №  |   p   | Test result |   k   |")
    print(rule)

    seen: set[int] = set()
    accepted = 0
    false_rejections = 0
    attempt = 0
    while accepted < args.wanted:
        attempt += 1
        n, divisors = generate_candidate(primes, args.min_length, args.max_length, rng)
        if n in seen:
            continue
        seen.add(n)
        if miller_test(n, args.rounds, divisors, rng):
            accepted += 1
            mark = "+"
        else:
            if miller_rabin(n, args.rounds, rng):
                false_rejections += 1
            mark = "-"
        print(f"{attempt:>5} | {n:>10} | {mark:>10} | {false_rejections:>5}")
    return 0