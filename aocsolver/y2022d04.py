"""Overlapping section assignments of elf pairs."""

from __future__ import annotations

import re
from collections.abc import Iterable

Section = tuple[int, int]
Pair = tuple[Section, Section]

_NUMBER = re.compile(r"[+-]?[0-9]+")


def _i32(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"number out of range: {text}")
    return value


def _section(text: str) -> Section:
    start, sep, end = text.partition("-")
    if not sep:
        raise ValueError(f"invalid section range: {text!r}")
    return _i32(start), _i32(end)


def _pair(text: str) -> Pair:
    first, sep, second = text.partition(",")
    if not sep:
        raise ValueError(f"invalid pair: {text!r}")
    return _section(first), _section(second)


def _contains(pair: Pair) -> bool:
    (a0, a1), (b0, b1) = pair
    return (a0 >= b0 and a1 <= b1) or (b0 >= a0 and b1 <= a1)


def _overlaps(pair: Pair) -> bool:
    (a0, a1), (b0, b1) = pair
    return (
        b0 <= a0 <= b1
        or b0 <= a1 <= b1
        or a0 <= b0 <= a1
        or a0 <= b1 <= a1
    )


def get_contained_pairs(data: Iterable[str | None], part: str) -> list[Pair]:
    """Pairs where one range holds the other ('a') or the ranges overlap ('b')."""
    checks = {"a": _contains, "b": _overlaps}
    check = checks.get(part)
    pairs = [_pair(item) for item in data if item is not None]
    if check is None:
        return []
    return [pair for pair in pairs if check(pair)]


def solve_a(text: str) -> str:
    return str(len(get_contained_pairs(text.splitlines(), "a")))


def solve_b(text: str) -> str:
    return str(len(get_contained_pairs(text.splitlines(), "b")))