"""Counting the calories carried by elves."""

from __future__ import annotations

import re
from collections.abc import Iterable

from aocsolver.inputs import parse_each

_NUMBER = re.compile(r"[+-]?[0-9]+")


def _i32(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"number out of range: {text}")
    return value


def get_total_calories(data: Iterable[int | None], part: str) -> int:
    """Largest total ('a') or sum of the three largest ('b'); None separates elves."""
    totals = [0]
    for calories in data:
        if calories is None:
            totals.append(0)
        else:
            totals[-1] += calories
    totals.sort(reverse=True)
    if part == "a":
        return totals[0]
    if part == "b":
        if len(totals) < 3:
            raise ValueError("fewer than three elves")
        return sum(totals[:3])
    return 0


def solve_a(text: str) -> str:
    return str(get_total_calories(parse_each(text.splitlines(), _i32), "a"))


def solve_b(text: str) -> str:
    return str(get_total_calories(parse_each(text.splitlines(), _i32), "b"))