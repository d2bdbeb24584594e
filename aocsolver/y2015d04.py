"""Mining hashes with a run of leading zeros."""

import hashlib
from itertools import count


def find_number(data: str, zeros: int) -> int:
    """Return the lowest number whose MD5 with the key starts with enough zeros."""
    prefix = "0" * zeros
    for i in count():
        digest = hashlib.md5(f"{data}{i}".encode("utf-8")).hexdigest()
        if digest.startswith(prefix):
            return i
    raise AssertionError("unreachable")


def solve_a(text: str) -> str:
    return str(find_number(text, 5))


def solve_b(text: str) -> str:
    return str(find_number(text, 6))