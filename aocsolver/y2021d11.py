"""Flashing dumbo octopuses on a ten by ten grid."""

from __future__ import annotations

from itertools import count

GRID_SIZE = 10
FLASHED = 10

Grid = list[list[int]]

_NEIGHBOURS = tuple(
    (dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dy, dx) != (0, 0)
)


def flash(grid: Grid, y: int, x: int) -> int:
    """Spread the flash of (y, x) to its neighbours.

    Returns how many further octopuses flash as a result.
    """
    flashes = 0
    pending = [(y, x)]
    while pending:
        cy, cx = pending.pop()
        for dy, dx in _NEIGHBOURS:
            ny, nx = cy + dy, cx + dx
            if not (0 <= ny < len(grid) and 0 <= nx < len(grid[ny])):
                continue
            if grid[ny][nx] < FLASHED:
                grid[ny][nx] += 1
                if grid[ny][nx] == FLASHED:
                    flashes += 1
                    pending.append((ny, nx))
    return flashes


def _digit(ch: str) -> int:
    if ch not in "0123456789":
        raise ValueError(f"invalid energy level: {ch!r}")
    return int(ch)


def _parse(text: str) -> Grid:
    lines = text.splitlines()
    if len(lines) > GRID_SIZE:
        raise ValueError(f"more than {GRID_SIZE} rows")
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for row, line in zip(grid, lines):
        if len(line) > GRID_SIZE:
            raise ValueError(f"row longer than {GRID_SIZE}: {line!r}")
        row[: len(line)] = [_digit(c) for c in line]
    return grid


def _step(grid: Grid) -> int:
    """Advance one step and return the number of octopuses that flashed."""
    ready = []
    for y, row in enumerate(grid):
        for x, energy in enumerate(row):
            if energy < FLASHED:
                row[x] = energy + 1
                if row[x] == FLASHED:
                    ready.append((y, x))
    flashes = len(ready)
    for y, x in ready:
        flashes += flash(grid, y, x)
    for row in grid:
        row[:] = [0 if energy == FLASHED else energy for energy in row]
    return flashes


def solve_a(text: str) -> str:
    grid = _parse(text)
    return str(sum(_step(grid) for _ in range(100)))


def solve_b(text: str) -> str:
    grid = _parse(text)
    everyone = GRID_SIZE * GRID_SIZE
    for turn in count(1):
        if _step(grid) == everyone:
            return str(turn)
    raise AssertionError("unreachable")