"""Counting paths through a cave system."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

Moves = Mapping[str, Sequence[str]]


def _is_small(cave: str) -> bool:
    return not any("A" <= c <= "Z" for c in cave)


def count_paths_a(
    possible_moves: Moves, visited_small_caves: Sequence[str], path: Sequence[str]
) -> int:
    """Paths to the end that visit each small cave at most once."""
    current = path[-1]
    if current == "end":
        return 1
    paths = 0
    for move in possible_moves[current]:
        visited = list(visited_small_caves)
        if _is_small(move):
            if move in visited:
                continue
            visited.append(move)
        paths += count_paths_a(possible_moves, visited, [*path, move])
    return paths


def count_paths_b(
    possible_moves: Moves, visited_small_caves: Sequence[str], path: Sequence[str]
) -> int:
    """Paths to the end where a single small cave may be visited twice."""
    current = path[-1]
    if current == "end":
        return 1
    paths = 0
    for move in possible_moves[current]:
        visited = list(visited_small_caves)
        if _is_small(move):
            can_visit_twice = move not in ("start", "end") and len(set(visited)) == len(
                visited
            )
            if not can_visit_twice and move in visited:
                continue
            visited.append(move)
        paths += count_paths_b(possible_moves, visited, [*path, move])
    return paths


def _parse(text: str) -> dict[str, list[str]]:
    moves: dict[str, list[str]] = {}
    for line in text.splitlines():
        parts = line.split("-")
        if len(parts) < 2:
            raise ValueError(f"invalid connection: {line!r}")
        a, b = parts[0], parts[1]
        moves.setdefault(a, []).append(b)
        moves.setdefault(b, []).append(a)
    return moves


def solve_a(text: str) -> str:
    return str(count_paths_a(_parse(text), ["start"], ["start"]))


def solve_b(text: str) -> str:
    return str(count_paths_b(_parse(text), ["start"], ["start"]))