"""Houses visited while delivering presents on a grid."""

from collections import Counter

_STEPS = {">": (1, 0), "^": (0, -1), "<": (-1, 0), "v": (0, 1)}


def get_houses_a(data: str) -> Counter:
    """Count presents per house when a single courier follows the directions."""
    x = y = 0
    houses = Counter({(0, 0): 1})
    for c in data:
        dx, dy = _STEPS.get(c, (0, 0))
        x += dx
        y += dy
        houses[(x, y)] += 1
    return houses


def get_houses_b(data: str) -> Counter:
    """Count presents per house when two couriers take turns."""
    positions = [(0, 0), (0, 0)]
    houses = Counter({(0, 0): 2})
    for i, c in enumerate(data):
        dx, dy = _STEPS.get(c, (0, 0))
        x, y = positions[i % 2]
        positions[i % 2] = (x + dx, y + dy)
        houses[positions[i % 2]] += 1
    return houses


def solve_a(text: str) -> str:
    return str(len(get_houses_a(text)))


def solve_b(text: str) -> str:
    return str(len(get_houses_b(text)))