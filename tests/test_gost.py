import pytest

from primelab.arith import is_prime, sieve
from primelab.gost import diemietko_test, generate_prime_gost, main


@pytest.mark.parametrize("q", sieve(30))
def test_generated_value_satisfies_conditions(q):
    p, u = generate_prime_gost(8, q)
    assert u >= 0 and u % 2 == 0
    assert (p - 1) % q == 0
    assert 2**7 < p <= 2**13
    assert diemietko_test(p, (p - 1) // q)


@pytest.mark.parametrize("bits", [4, 6, 8, 10, 12])
def test_generated_value_above_lower_bound(bits):
    p, _ = generate_prime_gost(bits, 3)
    assert p > 2 ** (bits - 1)
    assert ((p - 1) // 3) % 2 == 0


def test_generated_value_is_deterministic():
    p, u = generate_prime_gost(8, 7)
    assert (p - 1) % 7 == 0
    assert p > 2**7
    assert u % 2 == 0
    assert generate_prime_gost(8, 7) == (p, u)


def test_diemietko_fails_when_exponent_is_order_multiple():
    for p in sieve(300)[1:]:
        assert not diemietko_test(p, p - 1)


def test_diemietko_fails_for_composites_without_fermat_property():
    for n in range(4, 400):
        if not is_prime(n) and pow(2, n - 1, n) != 1:
            assert not diemietko_test(n, 1)


def test_rejects_bad_bits():
    with pytest.raises(ValueError):
        generate_prime_gost(0, 3)


def test_rejects_bad_q():
    with pytest.raises(ValueError):
        generate_prime_gost(8, 1)


def test_main_prints_table(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    rows = [
        [cell.strip() for cell in line.split("|")]
        for line in out.splitlines()
        if "|" in line and line.split("|")[0].strip().isdigit()
    ]
    assert [int(row[0]) for row in rows] == list(range(1, 11))
    assert all(row[2] in {"+", "-"} for row in rows)
    for row in rows:
        p = int(row[1])
        assert (row[2] == "+") == is_prime(p)