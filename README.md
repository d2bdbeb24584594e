# aocsolver

Solutions to Advent of Code puzzles, run by year and day.

Covered years and days:

- 2015: days 1 to 8
- 2017: day 1
- 2021: days 1 to 17
- 2022: days 1 to 9

Every day has two parts, `a` and `b`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
aocsolver --year 2021 --day 16a
aocsolver -y 2015 -d 1b
```

`python -m aocsolver.cli` takes the same options.

The year must have four digits and be one of 2015, 2017, 2021 or 2022.
The day is a day number followed by the part letter, such as `1a`, `01a`
or `16b`. A two-character day is padded with a leading zero (`1a` becomes
`01a`); a day of any length other than two or three characters is rejected.
A well-formed day that has no solution for that year prints an empty line.

The command reads the puzzle input from
`src/year<year>/day<NN>_input.txt`, relative to the current directory
(for example `src/year2021/day16_input.txt`), and prints the answer.
Invalid arguments, unreadable input files and malformed input are reported
on standard error as `error: ...`, and the command exits with status 1.

## From Python

Each day lives in its own module, named `y<year>d<day>`, for example
`aocsolver.y2021d16`. Every one of them offers `solve_a(text)` and
`solve_b(text)`, which take the puzzle input as a string and return the
answer as a string. Malformed input raises `ValueError`.

```python
from aocsolver import y2015d01

print(y2015d01.solve_a("(()(()("))   # 3
```

The dispatcher in `aocsolver.cli` picks the module for you:

```python
from aocsolver.cli import normalize_day, solve

day = normalize_day("1b")           # "01b"
print(solve("2015", day, "()())"))  # 5
```

`run(year, day)` does the same but reads that day's input file itself, and
`main(argv)` is what the `aocsolver` command calls.

`aocsolver.inputs` holds the small helpers for input files: `input_path`,
`read_text`, `read_lines` and `parse_each`.

## What it does not do

- Puzzle inputs are not included and are not downloaded; the input file
  for each day has to be put in place by hand.
- 2017 day 1 has no real solution: both parts print the input unchanged.
- 2022 day 9 has no real solution: both parts print `0`.
- 2021 day 13 part `b` does not draw the folded paper; it prints the
  remaining dots as a Python dictionary of `(x, y)` coordinates.