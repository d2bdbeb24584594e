import pytest

from aocsolver.y2015d05 import (
    get_nice_strings,
    has_double_pair,
    is_nice_string_a,
    is_nice_string_b,
    solve_a,
    solve_b,
)


@pytest.mark.parametrize(
    "line, nice",
    [
        ("ugknbfddgicrmopn", True),
        ("aaa", True),
        ("jchzalrnumimnmhp", False),
        ("haegwjzuvuyypxyu", False),
        ("dvszwmarrgswjxmb", False),
        ("iabjgmbbhilrcyyp", False),
    ],
)
def test_is_nice_string_a(line, nice):
    assert is_nice_string_a(line) is nice


@pytest.mark.parametrize(
    "line, nice",
    [
        ("qjhvhtzxzqqjkmpb", True),
        ("xxyxx", True),
        ("uurcxstgmygtbstg", False),
        ("ieodomkazucvgmuy", False),
        ("qpnxkuldeiituggg", False),
    ],
)
def test_is_nice_string_b(line, nice):
    assert is_nice_string_b(line) is nice


def test_overlapping_pair_does_not_count():
    assert is_nice_string_b("aaa") is False


def test_has_double_pair():
    assert has_double_pair(["ab", "cd", "ab"]) is True
    assert has_double_pair(["ab", "cd", "ef"]) is False


def test_get_nice_strings_keeps_order():
    data = "ugknbfddgicrmopn\njchzalrnumimnmhp\naaa"
    assert get_nice_strings(data, "a") == ["ugknbfddgicrmopn", "aaa"]


def test_get_nice_strings_unknown_part():
    assert get_nice_strings("aaa", "c") == []


def test_solve_wrappers():
    assert solve_a("ugknbfddgicrmopn\naaa\njchzalrnumimnmhp\n") == "2"
    assert solve_b("qjhvhtzxzqqjkmpb\nxxyxx\nuurcxstgmygtbstg\n") == "2"