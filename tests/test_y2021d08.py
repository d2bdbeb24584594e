from collections import Counter

import pytest

from aocsolver.y2021d08 import (
    add_number,
    get_diff_chars,
    solve_a,
    solve_b,
    sort_chars,
)

PATTERNS = "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab"
EXAMPLE = PATTERNS + " | cdfeb fcadb cdfeb cdbaf"


@pytest.mark.parametrize("text", ["abc", "gfedcba", "dab", "zaz", ""])
def test_sort_chars_is_descending_permutation(text):
    result = sort_chars(text)
    assert list(result) == sorted(result, reverse=True)
    assert sorted(result) == sorted(text)


def test_sort_chars_ignores_input_order():
    assert sort_chars("cagedb") == sort_chars("bdegac")


def test_diff_of_equal_strings_is_empty():
    assert get_diff_chars("abcd", "dcba") == []


def test_diff_against_empty_keeps_everything():
    assert get_diff_chars("ab", "") == ["a", "b"]
    assert get_diff_chars("", "cd") == ["c", "d"]


@pytest.mark.parametrize("a,b", [("feba", "cagedb"), ("ba", "cdfgeb"), ("abc", "bcd")])
def test_diff_is_symmetric_as_multiset(a, b):
    assert Counter(get_diff_chars(a, b)) == Counter(get_diff_chars(b, a))


def test_add_number_records_and_removes():
    patterns = ["ab", "dab", "ab"]
    numbers = {}
    add_number(patterns, numbers, 1, "ab")
    assert patterns == ["dab"]
    assert numbers == {1: sort_chars("ab")}


def test_add_number_keeps_existing_entry():
    patterns = ["dab"]
    numbers = {1: sort_chars("ab")}
    add_number(patterns, numbers, 1, "dab")
    assert numbers == {1: sort_chars("ab")}
    assert patterns == []


def test_solve_a_counts_unique_lengths():
    assert solve_a(PATTERNS + " | ab dab eafb acedgfb") == "4"


def test_solve_b_example():
    assert solve_b(EXAMPLE) == "5353"


def test_solve_b_sums_lines():
    assert int(solve_b(EXAMPLE + "\n" + EXAMPLE)) == 2 * int(solve_b(EXAMPLE))


def test_solve_a_sums_lines():
    line = PATTERNS + " | ab dab eafb acedgfb"
    assert int(solve_a(line + "\n" + line)) == 2 * int(solve_a(line))


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        solve_a(PATTERNS)


def test_undecodable_patterns_raise():
    with pytest.raises(ValueError):
        solve_b("ab | ab")


def test_unknown_output_raises():
    with pytest.raises(ValueError):
        solve_b(PATTERNS + " | zz")