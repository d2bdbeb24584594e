from aocsolver.y2015d03 import get_houses_a, get_houses_b, solve_a, solve_b


def test_get_houses_a_1():
    assert len(get_houses_a(">")) == 2


def test_get_houses_a_2():
    assert len(get_houses_a("^>v<")) == 4


def test_get_houses_a_3():
    assert len(get_houses_a("^v^v^v^v^v")) == 2


def test_get_houses_b_1():
    assert len(get_houses_b("^v")) == 3


def test_get_houses_b_2():
    assert len(get_houses_b("^>v<")) == 3


def test_get_houses_b_3():
    assert len(get_houses_b("^v^v^v^v^v")) == 11


def test_total_presents_matches_moves():
    moves = "^>v<^^"
    assert sum(get_houses_a(moves).values()) == len(moves) + 1
    assert sum(get_houses_b(moves).values()) == len(moves) + 2


def test_solve_wrappers():
    assert solve_a("^>v<") == "4"
    assert solve_b("^v^v^v^v^v") == "11"