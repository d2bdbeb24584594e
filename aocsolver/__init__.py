"""Advent of Code puzzle solutions for 2015, 2017, 2021 and 2022, one module per day."""

__version__ = "0.1.0"