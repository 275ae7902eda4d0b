"""Mirage maintenance: extrapolating sequences by repeated differences."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import reduce
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def text_to_numbers(text: str) -> list[list[int]]:
    return [[int(word) for word in line.split()] for line in text.splitlines()]


def _difference_rows(line: Sequence[int]) -> list[list[int]]:
    rows = [list(line)]
    while any(rows[-1]):
        last = rows[-1]
        rows.append([b - a for a, b in zip(last, last[1:])])
    if any(not row for row in rows):
        raise ValueError(f"cannot extrapolate {list(line)!r}")
    return rows


def extrapolate_forward(line: Sequence[int]) -> int:
    """The next value of the sequence."""
    return sum(row[-1] for row in _difference_rows(line))


def extrapolate_backward(line: Sequence[int]) -> int:
    """The value before the first value of the sequence."""
    firsts = [row[0] for row in _difference_rows(line)]
    return reduce(lambda acc, n: n - acc, reversed(firsts))


def solve_part_1(numbers: Sequence[Sequence[int]]) -> int:
    return sum(extrapolate_forward(line) for line in numbers)


def solve_part_2(numbers: Sequence[Sequence[int]]) -> int:
    return sum(extrapolate_backward(line) for line in numbers)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    numbers = text_to_numbers(Path(get_aoc_filename(argv, 2023, 9)).read_text())
    print(f"Part 1: {solve_part_1(numbers)}")
    print(f"Part 2: {solve_part_2(numbers)}")