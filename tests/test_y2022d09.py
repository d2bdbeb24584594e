import pytest

from aocsolver.y2022d09 import solve_a, solve_b


@pytest.mark.parametrize("text", ["", "R 4\nU 4\nL 3\nD 1", "U 1"])
def test_part_a_reports_zero(text):
    assert solve_a(text) == "0"


@pytest.mark.parametrize("text", ["", "R 4\nU 4\nL 3\nD 1", "U 1"])
def test_part_b_reports_zero(text):
    assert solve_b(text) == "0"