"""Counting depth increases in sonar sweeps."""

from collections.abc import Sequence


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"negative measurement: {text}")
    return value


def _measurements(text: str) -> list[int]:
    return [_unsigned(line) for line in text.splitlines()]


def _count_increases(values: Sequence[int]) -> int:
    return sum(1 for prev, cur in zip(values, values[1:]) if prev < cur)


def solve_a(text: str) -> str:
    return str(_count_increases(_measurements(text)))


def solve_b(text: str) -> str:
    values = _measurements(text)
    windows = [sum(w) for w in zip(values, values[1:], values[2:])]
    return str(_count_increases(windows))