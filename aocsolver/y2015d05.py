"""Sorting strings into nice and naughty."""

from collections.abc import Iterable

_VOWELS = set("aeiou")
_FORBIDDEN = ("ab", "cd", "pq", "xy")


def is_nice_string_a(line: str) -> bool:
    """Three vowels, a doubled letter, and none of the forbidden pairs."""
    if any(bad in line for bad in _FORBIDDEN):
        return False
    has_double = any(a == b for a, b in zip(line, line[1:]))
    vowels = sum(1 for c in line if c in _VOWELS)
    return has_double and vowels >= 3


def has_double_pair(pairs: Iterable[str]) -> bool:
    """Return True when any pair occurs more than once."""
    seen = set()
    for pair in pairs:
        if pair in seen:
            return True
        seen.add(pair)
    return False


def is_nice_string_b(line: str) -> bool:
    """A non-overlapping repeated pair and a letter repeated with one in between."""
    pairs = [a + b for a, b in zip(line, line[1:])]
    even, odd = pairs[::2], pairs[1::2]
    has_repeating = any(a == b for a, b in zip(line, line[2:]))

    has_double = (
        has_double_pair(even)
        or has_double_pair(odd)
        or any(
            pair == other
            for i, pair in enumerate(even)
            for j, other in enumerate(odd)
            if j not in (i, i - 1)
        )
    )
    return has_double and has_repeating


def get_nice_strings(data: str, part: str) -> list[str]:
    """Return the lines of data that are nice under the rules of part 'a' or 'b'."""
    rules = {"a": is_nice_string_a, "b": is_nice_string_b}
    rule = rules.get(part)
    if rule is None:
        return []
    return [line for line in data.splitlines() if rule(line)]


def solve_a(text: str) -> str:
    return str(len(get_nice_strings(text, "a")))


def solve_b(text: str) -> str:
    return str(len(get_nice_strings(text, "b")))