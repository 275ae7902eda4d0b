"""Frequency drift: sum of changes and first repeated frequency."""

from __future__ import annotations

import sys
from itertools import cycle
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def _changes(text: str) -> list[int]:
    result = []
    for line in text.splitlines():
        try:
            result.append(int(line))
        except ValueError:
            result.append(0)
    return result


def solve_part_1(text: str) -> int:
    """Sum all frequency changes; unparsable lines count as zero."""
    return sum(_changes(text))


def solve_part_2(text: str) -> int:
    """Return the first frequency reached twice while repeating the changes."""
    visited = {0}
    current = 0
    for change in cycle(_changes(text)):
        current += change
        if current in visited:
            return current
        visited.add(current)
    raise ValueError("no frequency changes given")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2018, 1)).read_text().strip()
    print(f"Part 1: {solve_part_1(text)}")
    print(f"Part 2: {solve_part_2(text)}")