"""Visibility and scenic scores in a grid of trees."""

from __future__ import annotations

from collections.abc import Sequence

Grid = list[list[int]]


def parse_grid(text: str) -> Grid:
    """Rows of tree heights; characters that are not digits are skipped."""
    return [[int(c) for c in line if c in "0123456789"] for line in text.splitlines()]


def _sight_lines(data: Sequence[Sequence[int]], y: int, x: int) -> list[list[int]]:
    """Trees seen from (y, x) looking right, left, up and down, nearest first."""
    row = data[y]
    return [
        list(row[x + 1 :]),
        list(reversed(row[:x])),
        [data[j][x] for j in range(y - 1, -1, -1)],
        [data[j][x] for j in range(y + 1, len(data))],
    ]


def count_trees(data: Sequence[Sequence[int]]) -> int:
    """Number of trees visible from outside the grid.

    Each tree of the first and last row adds the number of rows.
    """
    count = 0
    last_row = len(data) - 1
    for y, row in enumerate(data):
        if y in (0, last_row):
            count += len(data)
            continue
        for x, tree in enumerate(row):
            if x in (0, len(row) - 1):
                count += 1
                continue
            lines = _sight_lines(data, y, x)
            if not all(any(t >= tree for t in line) for line in lines):
                count += 1
    return count


def _viewing_distance(tree: int, line: Sequence[int]) -> int:
    for distance, other in enumerate(line, start=1):
        if other >= tree:
            return distance
    return len(line)


def get_tree_score(data: Sequence[Sequence[int]]) -> int:
    """Highest scenic score; a zero distance is replaced by the next one instead."""
    best = 0
    for y, row in enumerate(data):
        for x, tree in enumerate(row):
            score = 0
            for line in _sight_lines(data, y, x):
                distance = _viewing_distance(tree, line)
                score = distance if score == 0 else score * distance
            best = max(best, score)
    return best


def solve_a(text: str) -> str:
    return str(count_trees(parse_grid(text)))


def solve_b(text: str) -> str:
    return str(get_tree_score(parse_grid(text)))