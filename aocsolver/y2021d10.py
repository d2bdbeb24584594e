"""Syntax scoring of bracket chunks."""

from __future__ import annotations

_OPENING = {")": "(", "]": "[", "}": "{", ">": "<"}
_ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {"(": 1, "[": 2, "{": 3, "<": 4}


def solve_a(text: str) -> str:
    total = 0
    for line in text.splitlines():
        opened: list[str] = []
        for ch in line:
            if ch in _COMPLETION_SCORES:
                opened.append(ch)
            elif ch in _OPENING:
                if not opened:
                    raise ValueError(f"closing {ch!r} without an opening: {line!r}")
                if opened.pop() != _OPENING[ch]:
                    total += _ERROR_SCORES[ch]
                    break
    return str(total)


def _completion_score(line: str) -> int | None:
    """Score of the closers that complete line, or None if it is corrupted."""
    opened: list[str] = []
    for ch in line:
        if ch in _COMPLETION_SCORES:
            opened.append(ch)
        elif ch in _OPENING:
            if not opened:
                break
            if opened.pop() != _OPENING[ch]:
                return None
    score = 0
    for ch in reversed(opened):
        score = score * 5 + _COMPLETION_SCORES[ch]
    return score


def solve_b(text: str) -> str:
    scores = sorted(
        score
        for line in text.splitlines()
        if (score := _completion_score(line)) is not None
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return str(scores[len(scores) // 2])