"""Floors reached by following parenthesis instructions."""

_MOVES = {"(": 1, ")": -1}


def get_floor(instructions: str) -> int:
    """Return the floor reached after all instructions."""
    return sum(_MOVES.get(c, 0) for c in instructions)


def get_basement_position(instructions: str) -> int:
    """Return the 1-based position of the first step into the basement.

    If the basement is never entered, the number of instructions is returned.
    """
    floor = 0
    position = 0
    for position, c in enumerate(instructions, start=1):
        floor += _MOVES.get(c, 0)
        if floor == -1:
            break
    return position


def solve_a(text: str) -> str:
    return str(get_floor(text))


def solve_b(text: str) -> str:
    return str(get_basement_position(text))