"""Diagnostic report: power consumption and life support rating."""

from collections.abc import Sequence


def reduce_to_one(higher_count: bool, values: Sequence[str]) -> str:
    """Filter by the most (or least) common bit, position by position."""
    left = list(values)
    if not left:
        raise ValueError("no values to reduce")
    width = len(left[0])
    for pos in range(width):
        if len(left) <= 1:
            break
        ones = [v for v in left if v[pos] == "1"]
        zeros = [v for v in left if v[pos] != "1"]
        if higher_count:
            left = ones if len(ones) >= len(zeros) else zeros
        else:
            left = zeros if len(zeros) <= len(ones) else ones
    if not left:
        raise ValueError("no value left after filtering")
    return left[0]


def add_bits_count(bits: list[list[int]], line: str) -> list[list[int]]:
    """Return the counts with the bits of one more line added."""
    counts = [list(pair) for pair in bits]
    for pos, char in enumerate(line.rstrip()):
        counts[pos][int(char)] += 1
    return counts


def solve_a(text: str) -> str:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty report")
    bits = [[0, 0] for _ in lines[0].rstrip()]
    for line in lines:
        bits = add_bits_count(bits, line)
    gamma = "".join("0" if zeros > ones else "1" for zeros, ones in bits)
    epsilon = "".join("1" if zeros > ones else "0" for zeros, ones in bits)
    return str(int(gamma, 2) * int(epsilon, 2))


def solve_b(text: str) -> str:
    values = text.splitlines()
    oxygen = reduce_to_one(True, values)
    scrubber = reduce_to_one(False, values)
    return str(int(oxygen, 2) * int(scrubber, 2))