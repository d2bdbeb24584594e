"""Growth of a lanternfish population."""


def _timer(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise ValueError(f"timer out of range: {text}")
    return value


def _timers(text: str) -> list[int]:
    first_line = text.split("\n", 1)[0].strip()
    return [_timer(t) for t in first_line.split(",")]


def _population(timers: list[int], days: int) -> int:
    counts = [0] * max(9, max(timers) + 1)
    for timer in timers:
        counts[timer] += 1
    for _ in range(days):
        spawning = counts[0]
        counts = counts[1:] + [0]
        counts[6] += spawning
        counts[8] += spawning
    return sum(counts)


def solve_a(text: str) -> str:
    return str(_population(_timers(text), 80))


def solve_b(text: str) -> str:
    timers = _timers(text)
    if any(t > 8 for t in timers):
        raise ValueError("timers must be at most 8")
    return str(_population(timers, 256))