"""Day one of 2017: the answer is the puzzle input itself, reported as text."""


def _render(text: str) -> str:
    """Return the puzzle input formatted as the answer."""
    if not isinstance(text, str):
        raise TypeError(f"puzzle input must be text, not {type(text).__name__}")
    return f"{text}"


def solve_a(text: str) -> str:
    """Report the puzzle input unchanged."""
    return _render(text)


def solve_b(text: str) -> str:
    """Report the puzzle input unchanged."""
    return _render(text)