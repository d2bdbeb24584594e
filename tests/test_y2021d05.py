import pytest

from aocsolver.y2021d05 import get_calc_num, get_start_end, solve_a, solve_b

EXAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2"""


def test_example_straight_lines():
    assert solve_a(EXAMPLE) == "5"


def test_example_with_diagonals():
    assert solve_b(EXAMPLE) == "12"


def test_get_start_end_orders():
    assert get_start_end(5, 2) == (2, 5)
    assert get_start_end(2, 5) == (2, 5)


@pytest.mark.parametrize("a, b, step", [(3, 1, -1), (1, 3, 1), (2, 2, 0)])
def test_get_calc_num(a, b, step):
    assert get_calc_num(a, b) == step


def test_duplicate_vertical_line():
    assert solve_a("0,0 -> 0,2\n0,2 -> 0,0") == "3"


def test_diagonal_matches_straight_equivalent():
    diagonal = "0,0 -> 2,2\n2,2 -> 0,0"
    vertical = "0,0 -> 0,2\n0,2 -> 0,0"
    assert solve_b(diagonal) == solve_a(vertical)


def test_part_a_ignores_diagonals():
    assert solve_a("0,0 -> 2,2\n0,0 -> 2,2") == solve_a("")


def test_b_never_below_a():
    assert int(solve_b(EXAMPLE)) >= int(solve_a(EXAMPLE))


def test_negative_coordinate_rejected():
    with pytest.raises(ValueError):
        solve_a("-1,0 -> 1,0")


def test_missing_arrow_rejected():
    with pytest.raises(ValueError):
        solve_b("0,0 1,1")