"""Decoding scrambled seven-segment displays."""

from __future__ import annotations

from collections.abc import Iterable

_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}

# For each pattern length: (known digit, expected difference size, deduced digit),
# tried in order.
_DEDUCTIONS = {
    5: ((1, 3, 3), (6, 1, 5), (9, 3, 2)),
    6: ((4, 2, 9), (1, 6, 6), (5, 3, 0)),
}


def sort_chars(text: str) -> str:
    """Return the characters of text in descending order."""
    return "".join(sorted(text, reverse=True))


def add_number(
    patterns: list[str], numbers: dict[int, str], number: int, pattern: str
) -> None:
    """Record pattern as number unless already known, and drop it from patterns."""
    numbers.setdefault(number, sort_chars(pattern))
    patterns[:] = [p for p in patterns if p != pattern]


def get_diff_chars(string_1: str, string_2: str) -> list[str]:
    """Characters of either string that have no counterpart in the other."""
    target = list(string_2)
    diff = []
    for ch in string_1:
        if ch in target:
            target.remove(ch)
        else:
            diff.append(ch)
    return diff + target


def _split_entry(line: str) -> tuple[list[str], list[str]]:
    parts = line.split(" | ")
    if len(parts) < 2:
        raise ValueError(f"missing output separator: {line!r}")
    return parts[0].split(" "), parts[1].split(" ")


def _decode(patterns: Iterable[str]) -> dict[int, str]:
    remaining = list(patterns)
    numbers: dict[int, str] = {}
    while len(numbers) < 10:
        before = (len(numbers), len(remaining))
        for pattern in list(remaining):
            unique = _UNIQUE_LENGTHS.get(len(pattern))
            if unique is not None:
                add_number(remaining, numbers, unique, pattern)
                continue
            for reference, size, digit in _DEDUCTIONS.get(len(pattern), ()):
                known = numbers.get(reference)
                if known is not None and len(get_diff_chars(known, pattern)) == size:
                    add_number(remaining, numbers, digit, pattern)
                    break
        if (len(numbers), len(remaining)) == before:
            raise ValueError("patterns cannot be decoded")
    return numbers


def _read_output(numbers: dict[int, str], outputs: Iterable[str]) -> int:
    digits = []
    for part in outputs:
        wanted = sort_chars(part)
        digit = next((key for key, value in numbers.items() if value == wanted), None)
        if digit is None:
            raise ValueError(f"unknown output pattern: {part!r}")
        digits.append(str(digit))
    return int("".join(digits))


def solve_a(text: str) -> str:
    count = 0
    for line in text.splitlines():
        _, outputs = _split_entry(line)
        count += sum(1 for digit in outputs if len(digit) in _UNIQUE_LENGTHS)
    return str(count)


def solve_b(text: str) -> str:
    total = 0
    for line in text.splitlines():
        patterns, outputs = _split_entry(line)
        total += _read_output(_decode(patterns), outputs)
    return str(total)