"""Fuel requirements for modules of given mass."""

from __future__ import annotations

import sys
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def _masses(text: str) -> list[int]:
    result = []
    for line in text.splitlines():
        try:
            value = int(line)
        except ValueError:
            value = 0
        result.append(value if value >= 0 else 0)
    return result


def get_required_fuel_part1(mass: int) -> int:
    """Fuel for a mass: a third of it, rounded down, minus two."""
    fuel = mass // 3 - 2
    if fuel < 0:
        raise ValueError(f"mass {mass} is too small to need fuel")
    return fuel


def get_required_fuel_part2(mass: int) -> int:
    """Fuel for a mass, including the fuel needed to carry the fuel."""
    total_fuel = 0
    step = mass
    while True:
        step //= 3
        if step <= 2:
            return total_fuel
        step -= 2
        total_fuel += step


def solve_part_1(text: str) -> int:
    return sum(get_required_fuel_part1(m) for m in _masses(text))


def solve_part_2(text: str) -> int:
    return sum(get_required_fuel_part2(m) for m in _masses(text))


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2019, 1)).read_text()
    print(f"part 1: {solve_part_1(text)}")
    print(f"part 2: {solve_part_2(text)}")