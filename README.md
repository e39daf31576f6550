# primelab

A small number-theory toolkit. It has a prime sieve, modular exponentiation,
trial-division and Miller–Rabin primality checks, and three ways to build
prime candidates and test them:

- the GOST construction `p = (N + u)·q + 1`;
- Miller's test on `n = 2m + 1`, using the prime factors of `m`;
- Pocklington's test on `n = R·F + 1`, using the primes of `F`.

It also has four short numeric exercises: a piecewise function table, a
series sum, a greedy number game and a coffee-cooling simulation.

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command can also be started with `--help`.

| Command | What it does |
| --- | --- |
| `primelab-gost` | Builds primes with the GOST procedure. The sieve primes serve as `q` in turn. Each result is checked with Miller–Rabin. Options: `--bits` (8), `--count` (10), `--limit` (500), `--seed`. |
| `primelab-miller` | Prints the sieve. Then it builds distinct candidates `n = 2m + 1` from random prime powers and runs Miller's test on each, until `--wanted` of them pass. The `k` column counts the rejected candidates that Miller–Rabin accepts. Options: `--limit`, `--rounds` (50), `--min-length` (3), `--max-length` (4), `--wanted` (10), `--seed`. |
| `primelab-pocklington` | Prints the sieve. Then it builds candidates `n = R·F + 1` with `--length` decimal digits. The `Test` column shows the Miller–Rabin result. The `k` column counts candidates that Miller–Rabin accepts and Pocklington's test rejects. It stops once `--wanted` candidates pass both tests. Options: `--limit`, `--length` (4), `--rounds` (50), `--wanted` (10), `--seed`. |
| `primelab-chart [start end step]` | Prints `x` and `y` for the piecewise function from `start` towards `end` with a signed step. It prompts for any value left out. |
| `primelab-series [a b]` | Sums `n^a / b^n` (`1 ≤ a, b ≤ 10`) and prints the result rounded to tenths as a reduced fraction. It prints `infinity` when `b = 1`. With no arguments it reads `a b` from standard input. |
| `primelab-game` | Reads `n`, `m` and then `n` numbers from standard input, with `4 ≤ n ≤ 50001`, `3 ≤ m ≤ 101` and `m < n`. It plays the greedy game and prints `1` if the first player's total is larger, otherwise `0`. |
| `primelab-coffee [initial ambient rate]` | Simulates Newton cooling with Euler steps and prints the curve and a least-squares line `a`, `b`. It prompts for any value left out. Options: `--duration` (30), `--step` (0.1). |

## Library use

```python
import random

from primelab.arith import sieve, mod_pow, miller_rabin, prime_factorization
from primelab.gost import generate_prime_gost
from primelab.pocklington import pocklington_test
from primelab.coffee import simulate_cooling, fit_line

rng = random.Random(1)
primes = sieve(500)
print(mod_pow(2, 10, 1000))            # 24
print(miller_rabin(97, 20, rng))       # True
print(prime_factorization(360))        # [(2, 3), (3, 2), (5, 1)]

p, u = generate_prime_gost(8, 3)       # p = (N + u)·3 + 1
print(pocklington_test(p, 10, [3], rng))

points = simulate_cooling(90.0, 20.0, 0.1, 30.0, 0.1)
slope, intercept = fit_line(points)
```

### Modules

- `primelab.arith` holds the shared helpers: `mod_pow`, `sieve`, `prime_factorization`, `is_prime`, `binary_length`, `decimal_length`, `random_numbers`, `random_of_length`, `miller_rabin` and `choose_prime`.
- `primelab.gost` holds `diemietko_test` and `generate_prime_gost`. `generate_prime_gost` raises `ValueError` if no prime is found below `2 ** (bits + 5)`.
- `primelab.miller` holds `miller_test` and `generate_candidate`.
- `primelab.pocklington` holds `pocklington_test` and `generate_candidate`.
- `primelab.piecewise` holds `chart` and `walk`. `walk` raises `ValueError` for a range that starts or ends left of -4, or for a step that points the wrong way.
- `primelab.series` holds `series_sum`, `nod` and `approximate_fraction`. `approximate_fraction` returns a `Fraction` or `None`.
- `primelab.game` holds `play`, which returns both players' totals.
- `primelab.coffee` holds `simulate_cooling` and `fit_line`.

Functions that use randomness take an optional `random.Random`, so a run can be repeated with a fixed seed.

## Limits

The Miller and Pocklington tests draw random bases. Their verdicts depend on those draws, and they are only as strong as the number of rounds. Candidates are small: a few decimal digits by default.