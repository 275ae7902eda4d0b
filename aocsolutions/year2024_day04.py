"""Ceres search: finding XMAS and X-shaped MAS in a letter grid."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

_DELTAS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


@dataclass(frozen=True, order=True)
class Position:
    x: int
    y: int

    def step(self, direction: int, steps: int) -> Position:
        """Move in one of the eight directions 0..7; other values stay put."""
        dx, dy = _DELTAS[direction] if 0 <= direction < len(_DELTAS) else (0, 0)
        return Position(self.x + dx * steps, self.y + dy * steps)


Grid = dict[str, set[Position]]


def text_to_map(text: str) -> Grid:
    """Group the grid positions by the letter found there."""
    grid: Grid = {}
    for y, line in enumerate(text.splitlines()):
        for x, ch in enumerate(line):
            grid.setdefault(ch, set()).add(Position(x, y))
    return grid


def check_letter(position: Position, grid: Grid, letter: str) -> bool:
    return position in grid.get(letter, ())


def _is_xmas(position: Position, direction: int, grid: Grid) -> bool:
    return all(
        check_letter(position.step(direction, distance), grid, letter)
        for distance, letter in enumerate("MAS", start=1)
    )


def count_xmas(position: Position, grid: Grid) -> int:
    """How many XMAS words start at the position."""
    return sum(1 for direction in range(8) if _is_xmas(position, direction, grid))


def part1(grid: Grid) -> int:
    if "X" not in grid:
        raise ValueError("no X in the grid")
    return sum(count_xmas(position, grid) for position in grid["X"])


def _is_part_of_x_mas(main_diagonal: bool, position: Position, grid: Grid) -> bool:
    if main_diagonal:
        first, second = position.step(0, 1), position.step(7, 1)
    else:
        first, second = position.step(2, 1), position.step(5, 1)
    return (
        check_letter(first, grid, "M") and check_letter(second, grid, "S")
        or check_letter(first, grid, "S") and check_letter(second, grid, "M")
    )


def part2(grid: Grid) -> int:
    """Count the A's at the centre of two crossing MAS words."""
    if "A" not in grid:
        raise ValueError("no A in the grid")
    return sum(
        1
        for position in grid["A"]
        if _is_part_of_x_mas(True, position, grid)
        and _is_part_of_x_mas(False, position, grid)
    )


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    grid = text_to_map(Path(get_aoc_filename(argv, 2024, 4)).read_text())
    print(f"Part 1 is {part1(grid)}")
    print(f"Part 2 is {part2(grid)}")