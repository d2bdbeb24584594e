"""Command line entry point that picks a puzzle and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from aocsolver import (
    y2015d01,
    y2015d02,
    y2015d03,
    y2015d04,
    y2015d05,
    y2015d06,
    y2015d07,
    y2015d08,
    y2017d01,
    y2021d01,
    y2021d02,
    y2021d03,
    y2021d04,
    y2021d05,
    y2021d06,
    y2021d07,
    y2021d08,
    y2021d09,
    y2021d10,
    y2021d11,
    y2021d12,
    y2021d13,
    y2021d14,
    y2021d15,
    y2021d16,
    y2021d17,
    y2022d01,
    y2022d02,
    y2022d03,
    y2022d04,
    y2022d05,
    y2022d06,
    y2022d07,
    y2022d08,
    y2022d09,
)
from aocsolver.inputs import input_path, read_text

Solver = Callable[[str], str]

AVAILABLE_YEARS = ("2015", "2017", "2021", "2022")


def _days(*modules) -> dict[str, Solver]:
    table: dict[str, Solver] = {}
    for number, module in enumerate(modules, start=1):
        table[f"{number:02d}a"] = module.solve_a
        table[f"{number:02d}b"] = module.solve_b
    return table


_SOLVERS: dict[str, dict[str, Solver]] = {
    "2015": _days(
        y2015d01, y2015d02, y2015d03, y2015d04, y2015d05, y2015d06, y2015d07, y2015d08
    ),
    "2017": _days(y2017d01),
    "2021": _days(
        y2021d01, y2021d02, y2021d03, y2021d04, y2021d05, y2021d06,
        y2021d07, y2021d08, y2021d09, y2021d10, y2021d11, y2021d12,
        y2021d13, y2021d14, y2021d15, y2021d16, y2021d17,
    ),
    "2022": _days(
        y2022d01, y2022d02, y2022d03, y2022d04, y2022d05,
        y2022d06, y2022d07, y2022d08, y2022d09,
    ),
}


def _check_year(year: int | str) -> str:
    year = str(year)
    if len(year) != 4:
        raise ValueError(f"Invalid year: {year} - Year must have 4 digits")
    if year not in AVAILABLE_YEARS:
        raise ValueError(
            f"Invalid year: {year} - Available years are {list(AVAILABLE_YEARS)}"
        )
    return year


def normalize_day(day: str) -> str:
    """Pad a day such as '1a' to '01a'; reject anything else that is not 3 long."""
    if len(day) == 2:
        return "0" + day
    if len(day) == 3:
        return day
    if "a" not in day and "b" not in day:
        raise ValueError(
            f"Invalid day: {day} - Day must have a or b as suffix, i.e. 01a"
        )
    raise ValueError(
        f"Invalid day: {day} - Day must have 1 or 2 digits and end with a or b, i.e. 01a"
    )


def _solver(year: int | str, day: str) -> tuple[str, str, Solver | None]:
    year = _check_year(year)
    key = normalize_day(day)
    return year, key, _SOLVERS[year].get(key)


def solve(year: int | str, day: str, text: str) -> str:
    """Answer a puzzle part for the given input; unknown days give ''."""
    _, _, solver = _solver(year, day)
    return "" if solver is None else solver(text)


def run(year: int | str, day: str) -> str:
    """Answer a puzzle part, reading its input file from the usual place."""
    year, key, solver = _solver(year, day)
    if solver is None:
        return ""
    return solver(read_text(input_path(year, key[:2])))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aocsolver", description="Print the answer to one part of a puzzle day."
    )
    parser.add_argument("-y", "--year", required=True)
    parser.add_argument("-d", "--day", required=True)
    args = parser.parse_args(argv)
    try:
        answer = run(args.year, args.day)
    except (ValueError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())