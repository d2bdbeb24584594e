import pytest

from aocsolver.y2022d02 import calc_round_a, calc_round_b, get_score, solve_a, solve_b

DATA = ["A Y", "B X", "C Z"]


def test_get_score_a():
    assert get_score(DATA, "a") == 15


def test_get_score_b():
    assert get_score(DATA, "b") == 12


def test_get_score_skips_missing_rounds():
    assert get_score(["A Y", None, "C Z"], "a") == 14


def test_get_score_unknown_part():
    assert get_score(DATA, "c") == 0


@pytest.mark.parametrize(
    "instruction, expected", [("A Y", 8), ("B X", 1), ("C Z", 6), ("A W", 0)]
)
def test_calc_round_a(instruction, expected):
    assert calc_round_a(instruction) == expected


@pytest.mark.parametrize(
    "instruction, expected", [("A Y", 4), ("B X", 1), ("C Z", 7), ("D Z", 0)]
)
def test_calc_round_b(instruction, expected):
    assert calc_round_b(instruction) == expected


def test_round_without_second_column():
    with pytest.raises(ValueError):
        calc_round_a("A")


def test_solve():
    text = "A Y\nB X\nC Z\n"
    assert solve_a(text) == "15"
    assert solve_b(text) == "12"