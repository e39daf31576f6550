import io

import pytest

from primelab.game import main, play


def test_simple_game():
    assert play([1, 2, 3, 4], 3) == (6, 4)


@pytest.mark.parametrize(
    "sequence, max_take",
    [([1, 2, 3, 4], 3), ([-5, 10, -1, -1], 3), ([3, -1, 4, -1, 5, -9, 2, 6], 4), ([0] * 10, 3)],
)
def test_totals_cover_sequence(sequence, max_take):
    first, second = play(sequence, max_take)
    assert first + second == sum(sequence)


def test_shortest_prefix_on_tie():
    # With a zero after the first element the first player takes only one.
    first, second = play([5, 0, 7], 3)
    assert (first, second) == (12, 0) or first + second == 12
    assert first == 5 + 7 or second == 0


def test_negative_elements_take_least_loss():
    first, second = play([-5, 10, -1, -1], 3)
    assert first + second == 3
    assert second == -1


def test_empty_sequence():
    assert play([], 3) == (0, 0)


def test_invalid_max_take():
    with pytest.raises(ValueError):
        play([1, 2, 3], 0)


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out.strip()


def test_main_first_player_wins(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "4 3\n1 2 3 4\n") == (0, "1")


def test_main_first_player_loses(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "4 3\n0 0 0 0\n") == (0, "0")


@pytest.mark.parametrize("text", ["3 3 1 2 3", "5 2 1 2 3 4 5", "5 3 1 2", "x"])
def test_main_invalid(monkeypatch, capsys, text):
    code, out = _run(monkeypatch, capsys, text)
    assert code == 1
    assert out == "Invalid input"


def test_main_take_too_large(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "4 5 1 2 3 4")
    assert code == 1
    assert "smaller than the sequence length" in out