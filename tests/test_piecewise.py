import math

import pytest

from primelab.piecewise import chart, main, walk


@pytest.mark.parametrize("x", [-4.0, -3.5, -2.0, -1.2, -0.3, 0.0])
def test_half_circle_invariant(x):
    y = chart(x)
    assert y >= 0
    assert y * y + (x + 2) ** 2 == pytest.approx(4.0)


@pytest.mark.parametrize("x", [0.01, 0.25, 0.49])
def test_zero_gap(x):
    assert chart(x) == 0


@pytest.mark.parametrize("x", [2.0001, 3.0, 100.0])
def test_constant_tail(x):
    assert chart(x) == 1


def test_log_branch_sign():
    assert chart(0.5) < 0
    assert chart(1.0) == 0
    assert chart(1.5) > 0


def test_left_of_chart_is_zero():
    assert chart(-10.0) == 0


def test_walk_ascending():
    rows = list(walk(0.0, 1.0, 0.5))
    assert [x for x, _ in rows] == [0.0, 0.5, 1.0]
    assert all(y == chart(x) for x, y in rows)


def test_walk_descending_stays_in_range():
    rows = list(walk(1.0, -1.0, -0.25))
    xs = [x for x, _ in rows]
    assert xs[0] == 1.0
    assert all(-1.0 <= x <= 1.0 for x in xs)
    assert xs == sorted(xs, reverse=True)


def test_walk_equal_ends_yields_nothing():
    assert list(walk(1.0, 1.0, 0.5)) == []


@pytest.mark.parametrize(
    "start, end, step",
    [(-5.0, 1.0, 0.1), (1.0, -4.5, -0.1), (0.0, 1.0, -0.1), (1.0, 0.0, 0.1), (0.0, 1.0, 0.0)],
)
def test_walk_errors(start, end, step):
    with pytest.raises(ValueError):
        walk(start, end, step)


def test_main_table(capsys):
    assert main(["0", "1", "0.5"]) == 0
    out = capsys.readouterr().out
    rows = [line for line in out.splitlines() if line.startswith("| ") and "x" not in line]
    assert len(rows) == 3
    assert rows[0] == "| 0.00000 | 0.00000 |"


def test_main_reports_bounds(capsys):
    assert main(["-5", "1", "0.5"]) == 0
    assert "Out of chart bounds" in capsys.readouterr().out


def test_main_prompts(monkeypatch, capsys):
    answers = iter(["2", "3", "1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"| 2.00000 | {math.log(2) / 2:3.5f} |" in out