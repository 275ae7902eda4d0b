"""Trebuchet calibration: first and last digit of each line."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

_WORDS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _digit(ch: str) -> int | None:
    return int(ch) if "0" <= ch <= "9" else None


def line_part_1(line: str) -> list[int]:
    """The digits of the line, in order."""
    result = []
    for ch in line:
        if ch.isnumeric():
            value = _digit(ch)
            if value is None:
                raise ValueError(f"not a decimal digit: {ch!r}")
            result.append(value)
    return result


def line_part_2(line: str) -> list[int]:
    """The digits of the line, counting spelled-out digits; overlaps allowed."""
    result = []
    for start in range(len(line)):
        value = _digit(line[start])
        if value is None:
            value = next(
                (v for word, v in _WORDS.items() if line.startswith(word, start)),
                None,
            )
        if value is not None:
            result.append(value)
    return result


def do_the_numbers(numbers: Sequence[int]) -> int:
    """Combine the first and last digit into a two-digit number."""
    if not numbers:
        raise ValueError("line holds no digits")
    return numbers[0] * 10 + numbers[-1]


def solve(text: str, part_fn: Callable[[str], list[int]]) -> int:
    return sum(do_the_numbers(part_fn(line)) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2023, 1)).read_text()
    print(f"Part 1: {solve(text, line_part_1)}")
    print(f"Part 2: {solve(text, line_part_2)}")