"""Aligning crab submarines with the least fuel."""

from collections import Counter
from collections.abc import Callable


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"negative position: {text}")
    return value


def _lowest_cost(text: str, cost: Callable[[int], int]) -> int:
    first_line = text.split("\n", 1)[0].strip()
    crabs = Counter(_unsigned(c) for c in first_line.split(","))
    return min(
        sum(cost(abs(position - target)) * n for position, n in crabs.items())
        for target in range(min(crabs), max(crabs) + 1)
    )


def solve_a(text: str) -> str:
    return str(_lowest_cost(text, lambda distance: distance))


def solve_b(text: str) -> str:
    return str(_lowest_cost(text, lambda distance: distance * (distance + 1) // 2))