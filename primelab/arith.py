"""Integer arithmetic helpers shared by the primality tools."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence


def _rng(rng: random.Random | None) -> random.Random:
    return random.Random() if rng is None else rng


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def sieve(limit: int) -> list[int]:
    """Return all primes not greater than ``limit`` (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [number for number, flag in enumerate(flags) if flag]


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Return the canonical factorization of ``n`` as (prime, exponent) pairs."""
    factors: list[tuple[int, int]] = []
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            count = 0
            while n % divisor == 0:
                n //= divisor
                count += 1
            factors.append((divisor, count))
        divisor += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def is_prime(n: int) -> bool:
    """Deterministic primality check by trial division."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def binary_length(n: int) -> int:
    """Number of binary digits of a positive ``n``; zero otherwise."""
    return n.bit_length() if n > 0 else 0


def decimal_length(n: int) -> int:
    """Number of decimal digits of ``n``, ignoring the sign (zero has one)."""
    return len(str(abs(n)))


def random_numbers(
    count: int, start: int, end: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` uniform random integers from ``start`` to ``end`` inclusive."""
    generator = _rng(rng)
    return [generator.randint(start, end) for _ in range(count)]


def random_of_length(length: int, rng: random.Random | None = None) -> int:
    """Return a uniform random integer with exactly ``length`` decimal digits."""
    if length <= 0:
        return 0
    return _rng(rng).randint(10 ** (length - 1), 10**length - 1)


def miller_rabin(n: int, rounds: int, rng: random.Random | None = None) -> bool:
    """Probabilistic Miller-Rabin test with ``rounds`` random bases."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    generator = _rng(rng)
    s, r = 0, n - 1
    while r % 2 == 0:
        s += 1
        r //= 2
    for _ in range(rounds):
        a = generator.randint(2, n - 2)
        x = pow(a, r, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def choose_prime(primes: Sequence[int], rng: random.Random | None = None) -> int:
    """Pick a random element of a non-empty prime list."""
    if not primes:
        raise ValueError("prime list is empty")
    return _rng(rng).choice(primes)