"""Playing bingo against a giant squid."""

from __future__ import annotations

import re
from collections.abc import Sequence

Board = list[list[int]]

_MARKED = -1
_NUMBER = re.compile(r"[+-]?[0-9]+")


def _i8(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not -128 <= value <= 127:
        raise ValueError(f"number out of range: {text}")
    return value


def _copy(boards: Sequence[Board]) -> list[Board]:
    return [[list(row) for row in board] for board in boards]


def _mark_row(row: list[int], columns: list[int], number: int) -> int:
    """Mark number in row, update the column counts, return the row's marked count."""
    found = 0
    for i, cell in enumerate(row):
        if cell == _MARKED:
            columns[i] += 1
            found += 1
        if cell == number:
            row[i] = _MARKED
            columns[i] += 1
            found += 1
    return found


def get_winner_board_a(
    boards: Sequence[Board], draw_numbers: Sequence[int]
) -> tuple[int, Board]:
    """Return the winning number and the state of the first board to win."""
    boards = _copy(boards)
    for number in draw_numbers:
        for board in boards:
            columns = [0] * len(board)
            for row in board:
                found = _mark_row(row, columns, number)
                if found == len(row) or len(board) in columns:
                    return number, [list(r) for r in board]
    raise ValueError("No board won")


def get_winner_board_b(
    boards: Sequence[Board], draw_numbers: Sequence[int]
) -> tuple[int, Board]:
    """Return the winning number and the state of the last board to win."""
    boards = _copy(boards)
    won: set[int] = set()
    for number in draw_numbers:
        for board_id, board in enumerate(boards):
            columns = [0] * len(board)
            for row in board:
                found = _mark_row(row, columns, number)
                if found == len(row) or len(row) in columns:
                    won.add(board_id)
                    if len(won) == len(boards):
                        return number, [list(r) for r in board]
    raise ValueError("No board won")


def _parse(text: str) -> tuple[list[int], list[Board]]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    draws = [_i8(n) for n in lines[0].rstrip().split(",")]
    boards: list[Board] = []
    for line in lines[1:]:
        if not line:
            boards.append([])
            continue
        if not boards:
            raise ValueError("board row before the first blank line")
        boards[-1].append([_i8(n) for n in line.split(" ") if n])
    return draws, boards


def _score(number: int, board: Board) -> int:
    return number * sum(v for row in board for v in row if v != _MARKED)


def solve_a(text: str) -> str:
    draws, boards = _parse(text)
    try:
        number, board = get_winner_board_b(boards, draws)
    except ValueError:
        return "Invalid"
    return str(_score(number, board))


def solve_b(text: str) -> str:
    draws, boards = _parse(text)
    try:
        number, board = get_winner_board_a(boards, draws)
    except ValueError:
        return "Invalid"
    return str(_score(number, board))