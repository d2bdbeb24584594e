"""Folding transparent paper covered in dots."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]
Fold = tuple[str, int]


def _reflect(point: Point, fold: Fold) -> Point:
    x, y = point
    axis, line = fold
    if axis == "y" and y > line:
        y = line - (y - line)
    elif axis == "x" and x > line:
        x = line - (x - line)
    return x, y


def fold_grid(grid: Iterable[Point], fold: Fold) -> set[Point]:
    """Return the dots left after folding along the given line."""
    return {_reflect(point, fold) for point in grid}


def _parse(text: str) -> tuple[list[Point], list[Fold]]:
    lines = text.splitlines()
    folds: list[Fold] = []
    while lines and lines[-1]:
        left, sep, value = lines.pop().partition("=")
        if not sep:
            raise ValueError(f"invalid fold: {left!r}")
        axis = "y" if "fold along y" in left else "x"
        folds.append((axis, int(value)))
    folds.reverse()
    if not lines:
        raise ValueError("missing blank line between dots and folds")
    lines.pop()
    if not folds:
        raise ValueError("no folds given")
    points = []
    for line in lines:
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"invalid dot: {line!r}")
        points.append((int(x), int(y)))
    return points, folds


def solve_a(text: str) -> str:
    points, folds = _parse(text)
    return str(len(fold_grid(points, folds[0])))


def solve_b(text: str) -> str:
    """Fold along every line and render the dots in reading order."""
    points, folds = _parse(text)
    grid = set(points)
    for fold in folds:
        grid = fold_grid(grid, fold)
    ordered = sorted(grid, key=lambda p: (p[1], p[0]))
    return repr({point: "#" for point in ordered})