"""Camp cleanup: section assignments that contain or overlap each other."""

from __future__ import annotations

import sys
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def line_minus(part: str) -> range:
    """Parse 'a-b' into the inclusive section range a..b."""
    bounds = [int(value) for value in part.split("-")]
    if len(bounds) < 2:
        raise ValueError(f"not a section range: {part!r}")
    return range(bounds[0], bounds[1] + 1)


def line_to_ranges(line: str) -> tuple[range, range]:
    """Parse 'a-b,c-d' into the two section ranges."""
    ranges = [line_minus(part) for part in line.split(",")]
    if len(ranges) < 2:
        raise ValueError(f"expected two ranges: {line!r}")
    return ranges[0], ranges[1]


def _end(section: range) -> int:
    return section.stop - 1


def overlaps_completely(range_a: range, range_b: range) -> bool:
    """True when one range contains both ends of the other."""
    return (
        range_b.start in range_a and _end(range_b) in range_a
        or range_a.start in range_b and _end(range_a) in range_b
    )


def overlaps_at_all(range_a: range, range_b: range) -> bool:
    """True when the two ranges share at least one section."""
    return (
        range_b.start in range_a
        or _end(range_b) in range_a
        or range_a.start in range_b
    )


def solve_part1(text: str) -> int:
    return sum(1 for line in text.splitlines() if overlaps_completely(*line_to_ranges(line)))


def solve_part2(text: str) -> int:
    return sum(1 for line in text.splitlines() if overlaps_at_all(*line_to_ranges(line)))


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2022, 4)).read_text()
    print(f"part1 {solve_part1(text)}")
    print(f"part2 {solve_part2(text)}")