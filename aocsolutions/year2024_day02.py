"""Red-nosed reports: safely increasing or decreasing levels."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def get_numbers(text: str) -> list[list[int]]:
    return [[int(word) for word in line.split()] for line in text.splitlines()]


def is_safe(numbers: Sequence[int]) -> bool:
    """All steps move the same way by 1 to 3."""
    diffs = [a - b for a, b in zip(numbers, numbers[1:])]
    if any(d == 0 or abs(d) > 3 for d in diffs):
        return False
    return len({d > 0 for d in diffs}) <= 1


def is_tolerable_safe(numbers: Sequence[int]) -> bool:
    """Safe, or safe after removing a single level."""
    if is_safe(numbers):
        return True
    return any(
        is_safe([*numbers[:skip], *numbers[skip + 1:]]) for skip in range(len(numbers))
    )


def part1(numbers: Sequence[Sequence[int]]) -> int:
    return sum(1 for report in numbers if is_safe(report))


def part2(numbers: Sequence[Sequence[int]]) -> int:
    return sum(1 for report in numbers if is_tolerable_safe(report))


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    numbers = get_numbers(Path(get_aoc_filename(argv, 2024, 2)).read_text())
    print(f"Part1: {part1(numbers)}")
    print(f"Part2: {part2(numbers)}")