"""Locating and reading puzzle input files."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")


def input_path(year: int | str, day: int | str) -> Path:
    """Return the conventional location of the input file for a puzzle day."""
    return Path("src") / f"year{year}" / f"day{int(day):02d}_input.txt"


def read_text(path: str | Path) -> str:
    """Read a whole input file as text."""
    return Path(path).read_text(encoding="utf-8")


def read_lines(path: str | Path) -> list[str]:
    """Read an input file as a list of lines without line endings."""
    return read_text(path).splitlines()


def parse_each(lines: Iterable[str], convert: Callable[[str], T]) -> list[T | None]:
    """Convert every line, putting None where the conversion fails."""
    parsed: list[T | None] = []
    for line in lines:
        try:
            parsed.append(convert(line))
        except ValueError:
            parsed.append(None)
    return parsed