"""Box IDs: checksum of letter counts and the common letters of close IDs."""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def line_count(line: str) -> dict[int, int]:
    """Count how often each byte occurs in the line."""
    return dict(Counter(line.encode()))


def solve_part_1(text: str) -> int:
    """Multiply the number of IDs with a letter twice by those with one thrice."""
    counts = [line_count(line) for line in text.splitlines()]
    twos = sum(1 for c in counts if 2 in c.values())
    threes = sum(1 for c in counts if 3 in c.values())
    return twos * threes


def solve_part_2(text: str) -> str:
    """Return the common letters of the first two IDs that differ in one place."""
    lines = text.splitlines()
    for i, check in enumerate(lines):
        for line in lines[i + 1:]:
            common = [a for a, b in zip(check, line) if a == b]
            if len(common) == len(check) - 1:
                return "".join(common)
    raise ValueError("fail")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2018, 2)).read_text().strip()
    print(f"Part 1: {solve_part_1(text)}")
    print(f"Part 2: {solve_part_2(text)}")