"""Low points and basins of a height map."""

from __future__ import annotations

from collections.abc import Iterator
from math import prod

Grid = list[list[int]]

_WALL = 9


def _digit(ch: str) -> int:
    if ch not in "0123456789":
        raise ValueError(f"invalid height: {ch!r}")
    return int(ch)


def _parse(text: str) -> Grid:
    return [[_digit(c) for c in line] for line in text.splitlines()]


def explore_basin(grid: Grid, y: int, x: int, visited: set[tuple[int, int]]) -> int:
    """Size of the unvisited basin reachable from (y, x); marks its cells visited."""
    size = 0
    stack = [(y, x)]
    while stack:
        cy, cx = stack.pop()
        if not (0 <= cy < len(grid) and 0 <= cx < len(grid[cy])):
            continue
        if grid[cy][cx] == _WALL or (cy, cx) in visited:
            continue
        visited.add((cy, cx))
        size += 1
        stack.extend(((cy - 1, cx), (cy + 1, cx), (cy, cx - 1), (cy, cx + 1)))
    return size


def _neighbours(grid: Grid, y: int, x: int) -> Iterator[int]:
    row = grid[y]
    if y > 0:
        yield grid[y - 1][x]
    if x < len(row) - 1:
        yield row[x + 1]
    if y < len(grid) - 1:
        yield grid[y + 1][x]
    if x > 0:
        yield row[x - 1]


def solve_a(text: str) -> str:
    grid = _parse(text)
    risk = sum(
        1 + height
        for y, row in enumerate(grid)
        for x, height in enumerate(row)
        if all(height < n for n in _neighbours(grid, y, x))
    )
    return str(risk)


def solve_b(text: str) -> str:
    grid = _parse(text)
    visited: set[tuple[int, int]] = set()
    sizes = [
        size
        for y, row in enumerate(grid)
        for x in range(len(row))
        if (size := explore_basin(grid, y, x, visited)) > 0
    ]
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    sizes.sort(reverse=True)
    return str(prod(sizes[:3]))