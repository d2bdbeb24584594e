"""Evaluating a circuit of 16-bit wires and logic gates."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MASK = 0xFFFF
_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Instruction:
    """A gate driving one wire: an optional operation on one or two operands."""

    operation: str | None
    left: str | None
    right: str

    @classmethod
    def from_string(cls, text: str) -> Instruction:
        parts = text.split(" ")
        if len(parts) == 1:
            return cls(None, None, parts[0])
        if len(parts) == 2:
            return cls(parts[0], None, parts[1])
        return cls(parts[1], parts[0], parts[2])


def parse(data: str) -> dict[str, Instruction]:
    """Map every wire to the instruction that drives it."""
    wires: dict[str, Instruction] = {}
    for line in data.splitlines():
        source, sep, target = line.partition(" -> ")
        if not sep:
            raise ValueError(f"invalid wiring: {line!r}")
        wires[target] = Instruction.from_string(source)
    return wires


def _operand(token: str, values: dict[str, int]) -> int | None:
    if _NUMBER.fullmatch(token):
        number = int(token)
        if number <= _MASK:
            return number
    return values.get(token)


def _shift_amount(amount: int) -> int:
    if amount >= 16:
        raise ValueError(f"shift by {amount} overflows a 16-bit value")
    return amount


def get_wire_value(values: dict[str, int], instruction: Instruction) -> int | None:
    """Evaluate an instruction, or return None while an input is still unknown."""
    left = None
    if instruction.left is not None:
        left = _operand(instruction.left, values)
        if left is None:
            return None

    right = _operand(instruction.right, values)
    if right is None:
        return None

    operation = instruction.operation
    if operation is None:
        return right
    if operation == "NOT":
        return ~right & _MASK
    if left is None:
        raise ValueError(f"{operation} needs two operands")
    if operation == "AND":
        return left & right
    if operation == "OR":
        return left | right
    if operation == "XOR":
        return left ^ right
    if operation == "LSHIFT":
        return (left << _shift_amount(right)) & _MASK
    if operation == "RSHIFT":
        return left >> _shift_amount(right)
    raise ValueError(f"unknown operation: {operation}")


def get_wire_values(wires: dict[str, Instruction]) -> dict[str, int]:
    """Resolve the signal on every wire."""
    values: dict[str, int] = {}
    while len(values) < len(wires):
        progress = False
        for wire, instruction in wires.items():
            if wire in values:
                continue
            value = get_wire_value(values, instruction)
            if value is not None:
                values[wire] = value
                progress = True
        if not progress:
            pending = sorted(set(wires) - set(values))
            raise ValueError(f"wires cannot be resolved: {', '.join(pending)}")
    return values


def solve_a(text: str) -> str:
    return str(get_wire_values(parse(text))["a"])


def solve_b(text: str) -> str:
    wires = parse(text)
    first = get_wire_values(wires)["a"]
    wires["b"] = Instruction(None, None, str(first))
    return str(get_wire_values(wires)["a"])