"""Differences between code and memory lengths of string literals."""

import re

_HEX_ESCAPE = re.compile(r"\\x[0-9A-Fa-f]{2}")
_BACKSLASH_ESCAPED = set("\t\r\n'\"\\")


def get_char_count_a(data: str) -> int:
    """Sum of literal length minus in-memory length over all lines."""
    total = 0
    for line in data.splitlines():
        decoded = line.replace("\\\\", "_").replace('\\"', "_")
        decoded = _HEX_ESCAPE.sub("_", decoded)
        total += len(line) - (len(decoded) - 2)
    return total


def _escaped_length(ch: str) -> int:
    if ch in _BACKSLASH_ESCAPED:
        return 2
    if " " <= ch <= "~":
        return 1
    return len(f"\\u{{{ord(ch):x}}}")


def get_char_count_b(data: str) -> int:
    """Sum of re-encoded length minus original length over all lines."""
    return sum(
        sum(_escaped_length(c) for c in line) + 2 - len(line.encode("utf-8"))
        for line in data.splitlines()
    )


def solve_a(text: str) -> str:
    return str(get_char_count_a(text))


def solve_b(text: str) -> str:
    return str(get_char_count_b(text))