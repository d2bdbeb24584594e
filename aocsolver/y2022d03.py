"""Priorities of items shared between rucksacks."""

from __future__ import annotations

import string
from collections.abc import Iterable

LETTERS = string.ascii_lowercase + string.ascii_uppercase


def _priority(item: str) -> int:
    position = LETTERS.find(item)
    if position < 0:
        raise ValueError(f"item has no priority: {item!r}")
    return position + 1


def _require(line: str | None) -> str:
    if line is None:
        raise ValueError("missing rucksack")
    return line


def get_sum_a(data: Iterable[str | None]) -> int:
    """Sum of priorities of the item found in both halves of each rucksack."""
    total = 0
    for line in data:
        rucksack = _require(line)
        half = len(rucksack) // 2
        second = rucksack[half:]
        shared = next((c for c in rucksack[:half] if c in second), None)
        if shared is not None:
            total += _priority(shared)
    return total


def get_sum_b(data: Iterable[str | None]) -> int:
    """Sum of priorities of the badge shared by each group of three rucksacks.

    A group without a shared item is never closed, so no later badge is found.
    """
    total = 0
    group: list[str] = []
    for line in data:
        group.append(_require(line))
        if len(group) != 3:
            continue
        first, second, third = group
        badge = next((c for c in first if c in second and c in third), None)
        if badge is not None:
            total += _priority(badge)
            group = []
    return total


def solve_a(text: str) -> str:
    return str(get_sum_a(text.splitlines()))


def solve_b(text: str) -> str:
    return str(get_sum_b(text.splitlines()))