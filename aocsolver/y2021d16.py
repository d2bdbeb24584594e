"""Decoding nested transmission packets."""

from __future__ import annotations

import string
from math import prod

_LITERAL = 4


def _slice(packet: str, start: int, end: int) -> str:
    if start > len(packet) or end > len(packet):
        raise ValueError(f"packet ends before bit {end}")
    return packet[start:end]


def _read_int(packet: str, start: int, end: int) -> int:
    return int(_slice(packet, start, end), 2)


def _literal_end(packet: str, position: int) -> int:
    """Position just after the groups of a literal starting at position."""
    while True:
        last = _slice(packet, position, position + 1) == "0"
        position += 5
        if last:
            return position


def parse_packet_a(packet: str, packet_limit: int | None = None) -> int:
    """Sum of the version numbers of every packet in the bit string."""
    if packet_limit is not None and not 0 <= packet_limit <= 255:
        raise ValueError(f"packet count out of range: {packet_limit}")
    total = 0
    pending = [packet]
    while pending:
        current = pending.pop()
        if not current or "1" not in current:
            continue
        total += _read_int(current, 0, 3)
        type_id = _read_int(current, 3, 6)
        if type_id == _LITERAL:
            end = _literal_end(current, 6)
            if end > len(current):
                raise ValueError("literal runs past the end of the packet")
            pending.append(current[end:])
        elif _slice(current, 6, 7) == "0":
            end = 22 + _read_int(current, 7, 22)
            if end > len(current):
                raise ValueError("sub-packets run past the end of the packet")
            pending.append(current[end:])
            pending.append(current[22:end])
        else:
            count = _read_int(current, 7, 18)
            if count > 255:
                raise ValueError(f"packet count out of range: {count}")
            pending.append(current[18:])
    return total


def _evaluate(type_id: int, results: list[int]) -> int:
    if type_id == 0:
        return sum(results)
    if type_id == 1:
        return prod(results)
    if not results:
        raise ValueError("operator packet without sub-packets")
    if type_id == 2:
        return min(results)
    if type_id == 3:
        return max(results)
    if len(results) < 2:
        raise ValueError("comparison needs two sub-packets")
    first, second = results[0], results[1]
    if type_id == 5:
        return int(first > second)
    if type_id == 6:
        return int(first < second)
    return int(first == second)


def parse_packet_b(
    packet: str, start: int = 0, end: int | None = None
) -> tuple[int | None, int | None]:
    """Evaluate the packet at start; return its value and the position after it.

    Returns (None, None) when there is no packet left to read.
    """
    if (end is not None and start == end) or not packet or "1" not in packet:
        return None, None
    type_id = _read_int(packet, start + 3, start + 6)

    if type_id == _LITERAL:
        position = start + 6
        groups = []
        while True:
            groups.append(_slice(packet, position + 1, position + 5))
            last = _slice(packet, position, position + 1) == "0"
            position += 5
            if last:
                break
        return int("".join(groups), 2), position

    results: list[int] = []
    next_position: int | None
    if _slice(packet, start + 6, start + 7) == "0":
        next_position = start + 22
        packet_end = next_position + _read_int(packet, start + 7, next_position)
        while True:
            value, following = parse_packet_b(packet, next_position, packet_end)
            if value is not None:
                results.append(value)
            if following is None:
                break
            next_position = following
    else:
        next_position = start + 18
        count = _read_int(packet, start + 7, next_position)
        for _ in range(count):
            if next_position is None:
                raise ValueError("sub-packet missing")
            value, next_position = parse_packet_b(packet, next_position, None)
            if value is not None:
                results.append(value)

    return _evaluate(type_id, results), next_position


def hex_to_binary(hex_string: str) -> str:
    """Expand every hexadecimal digit into four bits."""
    bits = []
    for ch in hex_string:
        if ch not in string.hexdigits:
            raise ValueError(f"invalid hexadecimal digit: {ch!r}")
        bits.append(format(int(ch, 16), "04b"))
    return "".join(bits)


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0].strip()


def solve_a(text: str) -> str:
    return str(parse_packet_a(hex_to_binary(_first_line(text)), None))


def solve_b(text: str) -> str:
    value, _ = parse_packet_b(hex_to_binary(_first_line(text)), 0, None)
    if value is None:
        raise ValueError("transmission holds no packet")
    return str(value)