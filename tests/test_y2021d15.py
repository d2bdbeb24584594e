import pytest

from aocsolver.y2021d15 import find_shortest_count, solve_a, solve_b

EXAMPLE = """1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


def test_solve_a_example():
    assert solve_a(EXAMPLE) == "40"


def test_solve_b_example():
    assert solve_b(EXAMPLE) == "315"


def test_small_grid():
    assert find_shortest_count([[1, 2], [3, 4]]) == 6


def test_start_cell_is_not_counted():
    assert solve_a("5") == "0"


def test_larger_map_costs_more():
    assert int(solve_b(EXAMPLE)) > int(solve_a(EXAMPLE))


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        find_shortest_count([])


def test_invalid_digit_raises():
    with pytest.raises(ValueError):
        solve_a("12\n3x\n")