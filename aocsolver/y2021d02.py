"""Piloting a submarine with simple movement commands."""


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"negative amount: {text}")
    return value


def _commands(text: str):
    for line in text.splitlines():
        command, _, amount = line.partition(" ")
        yield command, amount


def _lower(value: int, amount: int) -> int:
    if amount > value:
        raise ValueError("value would drop below zero")
    return value - amount


def solve_a(text: str) -> str:
    horizontal = depth = 0
    for command, amount in _commands(text):
        if command == "forward":
            horizontal += _unsigned(amount)
        elif command == "down":
            depth += _unsigned(amount)
        elif command == "up":
            depth = _lower(depth, _unsigned(amount))
    return str(horizontal * depth)


def solve_b(text: str) -> str:
    horizontal = depth = aim = 0
    for command, amount in _commands(text):
        value = _unsigned(amount)
        if command == "forward":
            horizontal += value
            depth += aim * value
        elif command == "down":
            aim += value
        elif command == "up":
            aim = _lower(aim, value)
    return str(horizontal * depth)