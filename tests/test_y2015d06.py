import pytest

from aocsolver.y2015d06 import (
    get_brightness,
    get_light_count,
    set_light_matrix_a,
    set_light_matrix_b,
    solve_a,
    solve_b,
)


def test_turn_on_everything():
    assert get_light_count(set_light_matrix_a("turn on 0,0 through 999,999")) == 1000000


def test_toggle_first_line():
    assert get_light_count(set_light_matrix_a("toggle 0,0 through 999,0")) == 1000


def test_turn_off_middle():
    assert get_light_count(set_light_matrix_a("turn off 499,499 through 500,500")) == 0


def test_brightness_single_light():
    assert get_brightness(set_light_matrix_b("turn on 0,0 through 0,0")) == 1


def test_brightness_toggle_everything():
    assert get_brightness(set_light_matrix_b("toggle 0,0 through 999,999")) == 2000000


def test_toggle_twice_restores():
    data = "toggle 0,0 through 9,9\ntoggle 0,0 through 9,9"
    assert get_light_count(set_light_matrix_a(data)) == 0


def test_brightness_never_negative():
    data = "turn off 0,0 through 0,0\nturn on 0,0 through 0,0"
    assert get_brightness(set_light_matrix_b(data)) == 1


def test_solve_strings():
    assert solve_a("turn on 0,0 through 999,0") == "1000"
    assert solve_b("toggle 0,0 through 999,0") == "2000"


def test_outside_grid_rejected():
    with pytest.raises(ValueError):
        set_light_matrix_a("turn on 0,0 through 1000,0")


def test_malformed_instruction_rejected():
    with pytest.raises(ValueError):
        set_light_matrix_b("toggle 0,0")