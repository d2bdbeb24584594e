"""Firing a probe into a target area."""

from __future__ import annotations

import math
import re

_NUMBER = re.compile(r"[+-]?[0-9]+")
_PREFIX_LENGTH = len("target area: ")


def calc_x_velo(x: int) -> int:
    """Smallest horizontal velocity whose drift can reach x (0 for negative x)."""
    doubled = x * 2.0
    if doubled <= 0:
        return 0
    return int(math.sqrt(doubled))


def calc_y_velo(y1: int, y2: int) -> int:
    """Highest upward velocity that still lands in the lower target bound."""
    return -min(y1, y2) - 1


def calc_coord(velo: int) -> int:
    """Distance covered by a velocity that decays by one each step."""
    return velo * (velo + 1) // 2


def _i32(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"number out of range: {text}")
    return value


def _bounds(text: str) -> tuple[int, int]:
    low, sep, high = text[2:].partition("..")
    if not sep:
        raise ValueError(f"invalid range: {text!r}")
    return _i32(low), _i32(high)


def _target(text: str) -> tuple[tuple[int, int], tuple[int, int]]:
    line = text.split("\n", 1)[0].strip()
    x_part, sep, y_part = line[_PREFIX_LENGTH:].partition(", ")
    if not sep:
        raise ValueError(f"invalid target area: {line!r}")
    return _bounds(x_part), _bounds(y_part)


def _hits(x_velo: int, y_velo: int, x_range, y_range) -> bool:
    (x1, x2), (y1, y2) = x_range, y_range
    x = y = 0
    while True:
        x += x_velo
        y += y_velo
        if x_velo > 0:
            x_velo -= 1
        y_velo -= 1
        if x > x2 or y < y1:
            return False
        if x1 <= x <= x2 and y1 <= y <= y2:
            return True


def solve_a(text: str) -> str:
    _, (y1, y2) = _target(text)
    return str(calc_coord(calc_y_velo(y1, y2)))


def solve_b(text: str) -> str:
    x_range, y_range = _target(text)
    y_max = calc_y_velo(*y_range)
    x_min = calc_x_velo(x_range[0])
    hits = sum(
        1
        for x_velo in range(x_min, x_range[1] + 1)
        for y_velo in range(y_range[0], y_max + 1)
        if _hits(x_velo, y_velo, x_range, y_range)
    )
    return str(hits)