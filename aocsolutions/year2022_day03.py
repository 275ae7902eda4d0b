"""Rucksack reorganisation: priorities of shared item types."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable
from itertools import islice
from pathlib import Path

PUZZLE_FILE = "puzzles/year2022-day3.txt"


def common_letter(line: str) -> str:
    """Return the item found in both halves of the rucksack."""
    half = len(line) // 2
    shared = set(line[:half]) & set(line[half:])
    if not shared:
        raise ValueError(f"no common item in {line!r}")
    return next(iter(shared))


def score_letter(letter: str) -> int:
    """Priority: a-z are 1-26, A-Z are 27-52."""
    if letter.isupper():
        return ord(letter) - ord("A") + 27
    return ord(letter) - ord("a") + 1


def solve_part1(lines: Iterable[str]) -> int:
    return sum(score_letter(common_letter(line)) for line in lines)


def common_letter_of_three(first: str, second: str, third: str) -> str:
    """Return the item carried by all three elves."""
    shared = set(first) & set(second) & set(third)
    if not shared:
        raise ValueError("no item common to the group")
    return next(iter(shared))


def solve_part2(lines: Iterable[str]) -> int:
    """Sum the badge priorities of each complete group of three."""
    iterator = iter(lines)
    total = 0
    while len(group := list(islice(iterator, 3))) == 3:
        total += score_letter(common_letter_of_three(*group))
    return total


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    filename = argv[0] if argv else PUZZLE_FILE
    lines = Path(filename).read_text().splitlines()

    start = time.perf_counter()
    score = solve_part1(lines)
    elapsed = time.perf_counter() - start
    print(f"Part 1 {filename} = {score} in {elapsed * 1000:.3f}ms")

    start = time.perf_counter()
    score = solve_part2(lines)
    elapsed = time.perf_counter() - start
    print(f"Part 2 {Path(filename).name} = {score} in {elapsed * 1000:.3f}ms")