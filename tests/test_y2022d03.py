import pytest

from aocsolver.y2022d03 import get_sum_a, get_sum_b, solve_a, solve_b

DATA = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


def test_get_sum_a():
    assert get_sum_a(DATA) == 157


def test_get_sum_b():
    assert get_sum_b(DATA) == 70


def test_get_sum_a_single_rucksack():
    assert get_sum_a(["vJrwpWtwJgWrhcsFMMfFFhFp"]) == 16


def test_get_sum_b_incomplete_group():
    assert get_sum_b(DATA[:2]) == 0


def test_missing_rucksack():
    with pytest.raises(ValueError):
        get_sum_a([None])


def test_item_without_priority():
    with pytest.raises(ValueError):
        get_sum_a(["1a1b"])


def test_solve():
    text = "\n".join(DATA) + "\n"
    assert solve_a(text) == "157"
    assert solve_b(text) == "70"