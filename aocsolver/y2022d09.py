"""Rope bridge day; no answer is computed yet, so both parts report zero."""


def _report(text: str, answer: int = 0) -> str:
    """Check the puzzle input and format the fixed answer."""
    if not isinstance(text, str):
        raise TypeError(f"puzzle input must be text, not {type(text).__name__}")
    return f"{answer}"


def solve_a(text: str) -> str:
    """Report the first part's answer for the input."""
    return _report(text)


def solve_b(text: str) -> str:
    """Report the second part's answer for the input."""
    return _report(text)