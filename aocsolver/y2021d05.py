"""Overlapping hydrothermal vent lines."""

from collections import Counter


def get_start_end(point_1: int, point_2: int) -> tuple[int, int]:
    """Return the two values in ascending order."""
    return (point_1, point_2) if point_1 < point_2 else (point_2, point_1)


def get_calc_num(point_1: int, point_2: int) -> int:
    """Step (-1, 0 or 1) that moves point_1 towards point_2."""
    if point_1 > point_2:
        return -1
    if point_1 < point_2:
        return 1
    return 0


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"negative coordinate: {text}")
    return value


def _coordinate(text: str) -> tuple[int, int]:
    parts = text.split(",")
    if len(parts) < 2:
        raise ValueError(f"invalid coordinate: {text!r}")
    return _unsigned(parts[0]), _unsigned(parts[1])


def _segments(text: str):
    for line in text.splitlines():
        start, sep, end = line.partition(" -> ")
        if not sep:
            raise ValueError(f"invalid line: {line!r}")
        yield _coordinate(start), _coordinate(end)


def _mark_straight(points: Counter, start, end) -> bool:
    (x1, y1), (x2, y2) = start, end
    if x1 == x2:
        low, high = get_start_end(y1, y2)
        points.update((x1, y) for y in range(low, high + 1))
        return True
    if y1 == y2:
        low, high = get_start_end(x1, x2)
        points.update((x, y1) for x in range(low, high + 1))
        return True
    return False


def _dangerous(points: Counter) -> int:
    return sum(1 for hits in points.values() if hits >= 2)


def solve_a(text: str) -> str:
    points: Counter = Counter()
    for start, end in _segments(text):
        _mark_straight(points, start, end)
    return str(_dangerous(points))


def solve_b(text: str) -> str:
    points: Counter = Counter()
    for start, end in _segments(text):
        if _mark_straight(points, start, end):
            continue
        (x, y), (x2, y2) = start, end
        dx, dy = get_calc_num(x, x2), get_calc_num(y, y2)
        while x != x2 and y != y2:
            points[(x, y)] += 1
            x += dx
            y += dy
        points[(x2, y2)] += 1
    return str(_dangerous(points))