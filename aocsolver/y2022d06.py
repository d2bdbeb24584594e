"""Finding start-of-packet and start-of-message markers."""

from __future__ import annotations

from collections.abc import Sequence


def is_unique_sequence(sequence: Sequence[str]) -> bool:
    """Return True when no character occurs twice."""
    return len(set(sequence)) == len(sequence)


def get_marker_position(data: str, sequence_length: int) -> int:
    """Characters read before the first run of distinct characters ends.

    A run ending on the last character is not found; 0 means no marker.
    """
    for end in range(sequence_length, len(data)):
        if is_unique_sequence(data[end - sequence_length : end]):
            return end
    return 0


def solve_a(text: str) -> str:
    return str(get_marker_position(text, 4))


def solve_b(text: str) -> str:
    return str(get_marker_position(text, 14))