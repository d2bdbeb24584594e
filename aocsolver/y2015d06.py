"""Switching and dimming a grid of lights."""

from collections.abc import Callable, Iterator

GRID_SIZE = 1000

Grid = list[list[int]]


def _coordinate(text: str) -> tuple[int, int]:
    parts = text.split(",")
    if len(parts) < 2:
        raise ValueError(f"invalid coordinate: {text!r}")
    x, y = int(parts[0]), int(parts[1])
    if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
        raise ValueError(f"coordinate outside the grid: {text!r}")
    return x, y


def _instructions(data: str) -> Iterator[tuple[str, tuple[int, int], tuple[int, int]]]:
    for line in data.splitlines():
        words = line.split(" ")
        if len(words) < 4:
            raise ValueError(f"invalid instruction: {line!r}")
        yield words[-4], _coordinate(words[-3]), _coordinate(words[-1])


def _apply(data: str, actions: dict[str, Callable[[int], int]]) -> Grid:
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for operation, (x0, y0), (x1, y1) in _instructions(data):
        action = actions.get(operation)
        if action is None:
            continue
        for row in grid[x0 : x1 + 1]:
            row[y0 : y1 + 1] = [action(v) for v in row[y0 : y1 + 1]]
    return grid


def set_light_matrix_a(data: str) -> Grid:
    """Lights that are either on (1) or off (0) after all instructions."""
    return _apply(
        data,
        {
            "on": lambda v: 1,
            "off": lambda v: 0,
            "toggle": lambda v: 1 - v,
        },
    )


def set_light_matrix_b(data: str) -> Grid:
    """Brightness of every light after all instructions."""
    return _apply(
        data,
        {
            "on": lambda v: v + 1,
            "off": lambda v: max(v - 1, 0),
            "toggle": lambda v: v + 2,
        },
    )


def get_light_count(matrix: Grid) -> int:
    """Number of lights that are on."""
    return sum(1 for row in matrix for light in row if light)


def get_brightness(matrix: Grid) -> int:
    """Total brightness of all lights."""
    return sum(map(sum, matrix))


def solve_a(text: str) -> str:
    return str(get_light_count(set_light_matrix_a(text)))


def solve_b(text: str) -> str:
    return str(get_brightness(set_light_matrix_b(text)))