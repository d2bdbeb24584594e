"""Growing polymers by pair insertion."""

from __future__ import annotations

from collections import Counter
from itertools import zip_longest


def _parse(text: str) -> tuple[str, dict[str, str]]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    rules: dict[str, str] = {}
    for line in lines[2:]:
        pair, sep, insert = line.partition(" -> ")
        if not sep:
            raise ValueError(f"invalid rule: {line!r}")
        rules.setdefault(pair, insert)
    return lines[0], rules


def _spread(counts: Counter) -> int:
    if not counts:
        raise ValueError("empty polymer")
    return max(counts.values()) - min(counts.values())


def solve_a(text: str) -> str:
    polymer, rules = _parse(text)
    for _ in range(10):
        pieces = []
        for a, b in zip_longest(polymer, polymer[1:], fillvalue=""):
            pieces.append(a)
            if b:
                pieces.append(rules.get(a + b, ""))
        polymer = "".join(pieces)
    return str(_spread(Counter(polymer)))


def solve_b(text: str) -> str:
    template, rules = _parse(text)
    if not template:
        raise ValueError("empty template")
    pairs = Counter(a + b for a, b in zip(template, template[1:]))
    for _ in range(40):
        grown: Counter = Counter()
        for pair, n in pairs.items():
            try:
                insert = rules[pair]
            except KeyError:
                raise ValueError(f"no insertion rule for {pair!r}") from None
            grown[pair[0] + insert] += n
            grown[insert + pair[1]] += n
        pairs = grown
    # Count the first letter of every pair, then the last letter, which never moves.
    letters: Counter = Counter()
    for pair, n in pairs.items():
        letters[pair[0]] += n
    letters[template[-1]] += 1
    return str(_spread(letters))