"""Boat races: ways to beat the record distance."""

from __future__ import annotations

import sys
from math import prod

PUZZLE = "Time:        42     89     91     89\nDistance:   308   1170   1291   1467"


def count_beating_distance(total_time: int, distance_to_beat: int) -> int:
    """Count the hold times in 1..total_time whose distance beats the record.

    The distance t * (total_time - t) is symmetric around total_time / 2, so
    the first winning hold time is found by binary search and mirrored.
    """
    if total_time < 1:
        return 0
    if distance_to_beat < 0:
        return total_time

    def distance(hold: int) -> int:
        return hold * (total_time - hold)

    peak = total_time // 2
    if peak < 1 or distance(peak) <= distance_to_beat:
        return 0

    low, high = 1, peak
    while low < high:
        mid = (low + high) // 2
        if distance(mid) > distance_to_beat:
            high = mid
        else:
            low = mid + 1
    return total_time - 2 * low + 1


def line_to_numbers(line: str) -> list[int]:
    """The numbers after the label of the line."""
    return [int(word) for word in line.split()[1:]]


def concat_line_to_number(line: str) -> int:
    """The numbers after the label read as a single number."""
    return int("".join(line.split()[1:]))


def _two_lines(text: str) -> tuple[str, str]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0], lines[1]


def solve_part_1(text: str) -> int:
    """Multiply the number of winning hold times of every race."""
    time_line, distance_line = _two_lines(text)
    races = list(zip(line_to_numbers(time_line), line_to_numbers(distance_line)))
    if not races:
        raise ValueError("no races")
    return prod(count_beating_distance(t, d) for t, d in races)


def solve_part_2(text: str) -> int:
    """Count the winning hold times of the single long race."""
    time_line, distance_line = _two_lines(text)
    return count_beating_distance(
        concat_line_to_number(time_line), concat_line_to_number(distance_line)
    )


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    print(f"Part 1 {solve_part_1(PUZZLE)}")
    print(f"Part 2 {solve_part_2(PUZZLE)}")