import pytest

from aocsolver.y2021d17 import calc_coord, calc_x_velo, calc_y_velo, solve_a, solve_b

EXAMPLE = "target area: x=20..30, y=-10..-5\n"


@pytest.mark.parametrize("target_x_min", [20, 25, 1010101, -11, -33, -12121217])
def test_calc_x_velo_reaches_target(target_x_min):
    velo = calc_x_velo(target_x_min)
    assert calc_coord(velo) >= target_x_min


def test_calc_x_velo_values():
    assert calc_x_velo(20) == 6
    assert calc_x_velo(-5) == 0


def test_calc_y_velo():
    assert calc_y_velo(-10, -5) == 9
    assert calc_y_velo(-5, -10) == 9


def test_calc_coord():
    assert calc_coord(9) == 45
    assert calc_coord(0) == 0


def test_solve_a():
    assert solve_a(EXAMPLE) == "45"


def test_solve_b():
    assert solve_b(EXAMPLE) == "112"


def test_invalid_target():
    with pytest.raises(ValueError):
        solve_a("target area: x=20..30")