import pytest

from aocsolver.y2021d06 import solve_a, solve_b

EXAMPLE = "3,4,3,1,2\n"


def test_example_80_days():
    assert solve_a(EXAMPLE) == "5934"


def test_example_256_days():
    assert solve_b(EXAMPLE) == "26984457539"


def test_population_is_additive():
    assert int(solve_a("3,4")) == int(solve_a("3")) + int(solve_a("4"))
    assert int(solve_b("1,2")) == int(solve_b("1")) + int(solve_b("2"))


def test_longer_run_grows():
    assert int(solve_b("3")) > int(solve_a("3"))


def test_later_timer_means_fewer_fish():
    assert int(solve_a("9")) <= int(solve_a("8"))


@pytest.mark.parametrize("text", ["9", "-1", "256", "", "a"])
def test_invalid_timers_rejected_in_b(text):
    with pytest.raises(ValueError):
        solve_b(text)