"""Rearranging stacks of supply crates."""

from __future__ import annotations

import re
from collections.abc import Iterable

Crates = list[list[str]]

_NUMBER = re.compile(r"\+?[0-9]+")


def _numbers(text: str) -> list[int]:
    return [int(token) for token in text.split() if _NUMBER.fullmatch(token)]


def init_crates(data: Iterable[str | None]) -> Crates:
    """Read the crate drawing up to the first blank line.

    When data is an iterator, the lines after the blank line are left in it,
    ready to be read as instructions.
    """
    lines = iter(data)
    header: list[str] = []
    for line in lines:
        if not line:
            break
        header.append(line)
    else:
        raise ValueError("crate drawing is not followed by a blank line")

    if not header:
        raise ValueError("missing crate drawing")
    labels = _numbers(header.pop())
    if not labels:
        raise ValueError("missing stack numbers")
    stack_count = labels[-1]

    crates: Crates = [[] for _ in range(stack_count)]
    for row in reversed(header):
        for stack, start in zip(crates, range(0, 4 * stack_count, 4)):
            if start > len(row):
                raise ValueError(f"crate row is too short: {row!r}")
            item = row[start : start + 4].strip()
            if not item:
                continue
            if len(item) < 2:
                raise ValueError(f"invalid crate: {item!r}")
            stack.append(item[1])
    return crates


def parse_instruction(instruction: str) -> tuple[int, int, int]:
    """Return how many crates to move and the 0-based source and target stacks."""
    numbers = _numbers(instruction)
    if len(numbers) < 3:
        raise ValueError(f"invalid instruction: {instruction!r}")
    count, source, target = numbers[:3]
    if source < 1 or target < 1:
        raise ValueError(f"stacks are numbered from 1: {instruction!r}")
    return count, source - 1, target - 1


def _stack(crates: Crates, index: int) -> list[str]:
    if not 0 <= index < len(crates):
        raise ValueError(f"no stack number {index + 1}")
    return crates[index]


def _moves(crates: Crates, instructions: Iterable[str | None]):
    for instruction in instructions:
        if instruction is None:
            raise ValueError("missing instruction")
        count, source, target = parse_instruction(instruction)
        yield count, _stack(crates, source), _stack(crates, target)


def move_crates_a(crates: Crates, instructions: Iterable[str | None]) -> None:
    """Move crates one at a time."""
    for count, source, target in _moves(crates, instructions):
        for _ in range(count):
            if not source:
                raise ValueError("cannot move a crate from an empty stack")
            target.append(source.pop())


def move_crates_b(crates: Crates, instructions: Iterable[str | None]) -> None:
    """Move crates several at once, keeping their order."""
    for count, source, target in _moves(crates, instructions):
        if count > len(source):
            raise ValueError("not enough crates on the stack")
        cut = len(source) - count
        moved = source[cut:]
        del source[cut:]
        target.extend(moved)


def get_top_crates(crates: Crates) -> str:
    """The crate on top of every stack."""
    if any(not stack for stack in crates):
        raise ValueError("a stack is empty")
    return "".join(stack[-1] for stack in crates)


def solve_a(text: str) -> str:
    lines = iter(text.splitlines())
    crates = init_crates(lines)
    move_crates_a(crates, lines)
    return get_top_crates(crates)


def solve_b(text: str) -> str:
    lines = iter(text.splitlines())
    crates = init_crates(lines)
    move_crates_b(crates, lines)
    return get_top_crates(crates)