"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from math import prod
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def surrounding(self) -> set[Position]:
        """The eight neighbouring positions."""
        return {
            Position(self.x + dx, self.y + dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx or dy
        }


@dataclass
class Number:
    number: int
    positions: set[Position] = field(default_factory=set)


@dataclass
class Schematic:
    numbers: list[Number] = field(default_factory=list)
    symbols: set[Position] = field(default_factory=set)


def parse_text_to_schematic(text: str) -> Schematic:
    """Collect the numbers with their cells and the positions of symbols."""
    schematic = Schematic()
    current: Number | None = None

    for y, line in enumerate(text.splitlines()):
        if current is not None:
            schematic.numbers.append(current)
            current = None
        for x, ch in enumerate(line):
            if ch.isnumeric():
                if not "0" <= ch <= "9":
                    raise ValueError("Not a digit")
                value = int(ch)
                if current is None:
                    current = Number(value, {Position(x, y)})
                else:
                    current.number = current.number * 10 + value
                    current.positions.add(Position(x, y))
                continue
            if current is not None:
                schematic.numbers.append(current)
                current = None
            if ch != ".":
                schematic.symbols.add(Position(x, y))

    if current is not None:
        schematic.numbers.append(current)
    return schematic


def is_number_adjacent_to_symbol(number: Number, symbols: Iterable[Position]) -> bool:
    """True when any cell of the number lies in the given set of positions."""
    return not number.positions.isdisjoint(symbols)


def solve_part_1(schematic: Schematic) -> int:
    """Sum the numbers adjacent to any symbol."""
    symbol_space = set().union(*(pos.surrounding() for pos in schematic.symbols))
    return sum(
        n.number
        for n in schematic.numbers
        if is_number_adjacent_to_symbol(n, symbol_space)
    )


def numbers_adjacent_to_symbol(
    symbol_pos: Position, numbers: Sequence[Number]
) -> list[Number]:
    space = symbol_pos.surrounding()
    return [n for n in numbers if is_number_adjacent_to_symbol(n, space)]


def solve_part_2(schematic: Schematic) -> int:
    """Sum the products of numbers around symbols touching exactly two."""
    total = 0
    for symbol in schematic.symbols:
        adjacent = numbers_adjacent_to_symbol(symbol, schematic.numbers)
        if len(adjacent) == 2:
            total += prod(n.number for n in adjacent)
    return total


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    schematic = parse_text_to_schematic(Path(get_aoc_filename(argv, 2023, 3)).read_text())
    print(f"Part 1: {solve_part_1(schematic)}")
    print(f"Part 2: {solve_part_2(schematic)}")