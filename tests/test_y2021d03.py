import pytest

from aocsolver.y2021d03 import add_bits_count, reduce_to_one, solve_a, solve_b

EXAMPLE = [
    "00100",
    "11110",
    "10110",
    "10111",
    "10101",
    "01111",
    "00111",
    "11100",
    "10000",
    "11001",
    "00010",
    "01010",
]


def test_example_power():
    assert solve_a("\n".join(EXAMPLE)) == "198"


def test_example_life_support():
    assert solve_b("\n".join(EXAMPLE)) == "230"


@pytest.mark.parametrize("higher", [True, False])
def test_reduce_returns_member(higher):
    assert reduce_to_one(higher, EXAMPLE) in EXAMPLE


def test_reduce_tie_breaks():
    assert reduce_to_one(True, ["0", "1"]) == "1"
    assert reduce_to_one(False, ["0", "1"]) == "0"


def test_reduce_single_value():
    assert reduce_to_one(False, ["101"]) == "101"


def test_reduce_empty_rejected():
    with pytest.raises(ValueError):
        reduce_to_one(True, [])


def test_add_bits_count_does_not_mutate():
    original = [[0, 0], [0, 0]]
    result = add_bits_count(original, "10\n")
    assert original == [[0, 0], [0, 0]]
    assert result[0][1] == 1 and result[1][0] == 1


def test_bit_counts_sum_to_line_count():
    bits = [[0, 0] for _ in EXAMPLE[0]]
    for line in EXAMPLE:
        bits = add_bits_count(bits, line)
    assert all(sum(pair) == len(EXAMPLE) for pair in bits)


def test_empty_report_rejected():
    with pytest.raises(ValueError):
        solve_a("")