from pathlib import Path

import pytest

from aocsolver.inputs import input_path, parse_each, read_lines, read_text


def test_input_path_layout():
    assert input_path(2015, 1) == Path("src/year2015/day01_input.txt")


def test_input_path_accepts_string_day():
    assert input_path("2021", "17") == Path("src") / "year2021" / "day17_input.txt"


def test_read_text_round_trip(tmp_path):
    target = tmp_path / "input.txt"
    content = "(()))(\nsecond line\n"
    target.write_text(content, encoding="utf-8")
    assert read_text(target) == content


def test_read_lines_strips_line_endings(tmp_path):
    target = tmp_path / "input.txt"
    target.write_text("alpha\nbeta\n\ngamma\n", encoding="utf-8")
    assert read_lines(target) == ["alpha", "beta", "", "gamma"]


def test_read_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "missing.txt")


def test_parse_each_marks_failures_with_none():
    assert parse_each(["1000", "", "2000", "x"], int) == [1000, None, 2000, None]


def test_parse_each_keeps_length():
    lines = ["a", "b", "c", ""]
    assert len(parse_each(lines, str)) == len(lines)
    assert parse_each(lines, str) == lines