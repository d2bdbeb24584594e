"""Lowest-risk path through a cave of risk levels."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from math import inf

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def find_shortest_count(grid: Sequence[Sequence[int]]) -> int:
    """Lowest total risk from the top left to the bottom right.

    The risk of the starting cell is not counted.
    """
    if not grid or not grid[0]:
        raise ValueError("empty grid")
    height, width = len(grid), len(grid[0])
    if any(len(row) < width for row in grid):
        raise ValueError("rows are shorter than the first row")
    distance = [[inf] * width for _ in range(height)]
    distance[0][0] = 0
    queue = [(0, 0, 0)]
    while queue:
        risk, x, y = heapq.heappop(queue)
        if risk > distance[y][x]:
            continue
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                candidate = risk + grid[ny][nx]
                if candidate < distance[ny][nx]:
                    distance[ny][nx] = candidate
                    heapq.heappush(queue, (candidate, nx, ny))
    return int(distance[-1][width - 1])


def _digit(ch: str) -> int:
    if ch not in "0123456789":
        raise ValueError(f"invalid risk level: {ch!r}")
    return int(ch)


def _parse(text: str) -> list[list[int]]:
    return [[_digit(c) for c in line] for line in text.splitlines()]


def solve_a(text: str) -> str:
    return str(find_shortest_count(_parse(text)))


def solve_b(text: str) -> str:
    tile = _parse(text)
    grid = [
        [(v + i + j - 1) % 9 + 1 for j in range(5) for v in row]
        for i in range(5)
        for row in tile
    ]
    return str(find_shortest_count(grid))