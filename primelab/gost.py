"""Prime generation by the GOST procedure, checked with Miller-Rabin."""

from __future__ import annotations

import argparse
import random

from primelab.arith import miller_rabin, sieve


def diemietko_test(p: int, n: int) -> bool:
    """Return whether 2**(p-1) == 1 and 2**n != 1 modulo ``p``."""
    return pow(2, p - 1, p) == 1 and pow(2, n, p) != 1


def generate_prime_gost(bits: int, q: int) -> tuple[int, int]:
    """Return ``(p, u)`` with ``p = (N + u) * q + 1`` passing the GOST condition.

    Raises ValueError when no candidate is found below ``2 ** (bits + 5)``.
    """
    if bits < 1:
        raise ValueError("bit length must be at least 1")
    if q < 2:
        raise ValueError("q must be at least 2")
    n = -(-(1 << (bits - 1)) // q)
    if n % 2:
        n += 1
    bound = 1 << (bits + 5)
    u = 0
    while True:
        p = (n + u) * q + 1
        if p > bound:
            raise ValueError(f"no GOST prime found for bits={bits}, q={q}")
        if diemietko_test(p, n + u):
            return p, u
        u += 2


def main(argv: list[str] | None = None) -> int:
    """Generate GOST primes for successive small q and print a table."""
    parser = argparse.ArgumentParser(description="GOST prime generation.")
    parser.add_argument("--bits", type=int, default=8)
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--limit", type=int, default=500)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    primes = sieve(args.limit)
    if not primes:
        parser.error("sieve limit yields no primes")

    rule = "-" * 37
    print(rule)
    print(f"{'№':>5} | {'p (ГОСТ)':>15} | {'+/-':>5} | ")
    print(rule)
    for index in range(args.count):
        q = primes[index % len(primes)]
        try:
            p, _ = generate_prime_gost(args.bits, q)
        except ValueError:
            p = -1
        mark = "+" if miller_rabin(p, 20, rng) else "-"
        print(f"{index + 1:>5} | {p:>15} | {mark:>5} | ")
    return 0