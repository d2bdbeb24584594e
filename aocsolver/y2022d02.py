"""Scoring a rock paper scissors strategy guide."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Shape(IntEnum):
    """A hand shape and the score for playing it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class RoundResult(IntEnum):
    """The outcome of a round and its score."""

    LOSS = 0
    DRAW = 3
    WIN = 6


# My shape column: (shape score, outcome score per opponent shape).
_ROUNDS_A = {
    "X": (1, {"A": 3, "C": 6}),
    "Y": (2, {"A": 6, "B": 3}),
    "Z": (3, {"B": 6, "C": 3}),
}

# (opponent shape, wanted outcome) -> the shape to play and the outcome.
_ROUNDS_B = {
    ("A", "X"): (Shape.SCISSORS, RoundResult.LOSS),
    ("A", "Y"): (Shape.ROCK, RoundResult.DRAW),
    ("A", "Z"): (Shape.PAPER, RoundResult.WIN),
    ("B", "X"): (Shape.ROCK, RoundResult.LOSS),
    ("B", "Y"): (Shape.PAPER, RoundResult.DRAW),
    ("B", "Z"): (Shape.SCISSORS, RoundResult.WIN),
    ("C", "X"): (Shape.PAPER, RoundResult.LOSS),
    ("C", "Y"): (Shape.SCISSORS, RoundResult.DRAW),
    ("C", "Z"): (Shape.ROCK, RoundResult.WIN),
}


def _columns(instruction: str) -> tuple[str, str]:
    parts = instruction.split(" ")
    if len(parts) < 2:
        raise ValueError(f"invalid round: {instruction!r}")
    return parts[0], parts[1]


def calc_round_a(instruction: str) -> int:
    """Score when the second column is the shape to play."""
    theirs, mine = _columns(instruction)
    entry = _ROUNDS_A.get(mine)
    if entry is None:
        return 0
    base, outcomes = entry
    return base + outcomes.get(theirs, 0)


def calc_round_b(instruction: str) -> int:
    """Score when the second column is the outcome to reach."""
    entry = _ROUNDS_B.get(_columns(instruction))
    if entry is None:
        return 0
    shape, result = entry
    return int(shape) + int(result)


def get_score(data: Iterable[str | None], part: str) -> int:
    """Total score over all rounds under the rules of part 'a' or 'b'."""
    rules = {"a": calc_round_a, "b": calc_round_b}
    rule = rules.get(part)
    if rule is None:
        return 0
    return sum(rule(item) for item in data if item is not None)


def solve_a(text: str) -> str:
    return str(get_score(text.splitlines(), "a"))


def solve_b(text: str) -> str:
    return str(get_score(text.splitlines(), "b"))