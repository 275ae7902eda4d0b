"""Historian hysteria: distance and similarity of two location lists."""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

Lists = tuple[list[int], list[int]]


def text_to_numbers(text: str) -> Lists:
    """Split the two columns into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        words = line.split()
        if len(words) < 2:
            raise ValueError("Missing")
        left.append(int(words[0]))
        right.append(int(words[1]))
    return left, right


def solve_part_1(numbers: Lists) -> int:
    """Sum of distances between the lists paired in sorted order."""
    left, right = numbers
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def solve_part_2(numbers: Lists) -> int:
    """Sum of each left number times how often it occurs on the right."""
    left, right = numbers
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    numbers = text_to_numbers(Path(get_aoc_filename(argv, 2024, 1)).read_text())
    print(f"Part 1: {solve_part_1(numbers)}")
    print(f"Part 2: {solve_part_2(numbers)}")