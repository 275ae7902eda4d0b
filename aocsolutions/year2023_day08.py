"""Haunted wasteland: following left/right instructions through a network."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from functools import reduce
from itertools import cycle
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

_NODE_RE = re.compile(r"(?P<here>\w{3}) = \((?P<left>\w{3}), (?P<right>\w{3})\)")


@dataclass(frozen=True, order=True)
class Location:
    """A three-character node name."""

    name: str

    @classmethod
    def parse(cls, word: str) -> Location:
        if len(word) < 3:
            raise ValueError(f"location needs three characters: {word!r}")
        return cls(word[:3])

    def ends_with(self, letter: str) -> bool:
        return self.name[2] == letter

    def __str__(self) -> str:
        return self.name


Network = dict[Location, tuple[Location, Location]]


def text_to_desert_map(text: str) -> tuple[str, Network]:
    """Return the instructions and the network of nodes."""
    lines = iter(text.splitlines())
    instructions = next(lines, None)
    if instructions is None:
        raise ValueError("No instructions")
    if next(lines, None) is None:
        raise ValueError("Missing blank line")

    network: Network = {}
    for line in lines:
        match = _NODE_RE.search(line)
        if match is None:
            raise ValueError(f"No captures: {line!r}")
        network[Location.parse(match["here"])] = (
            Location.parse(match["left"]),
            Location.parse(match["right"]),
        )
    return instructions, network


def _walk(start: Location, instructions: str, network: Network):
    """Yield (step, location) after every move."""
    directions = cycle(instructions)
    location = start
    step = 0
    while True:
        step += 1
        direction = next(directions, None)
        if direction is None:
            raise ValueError("no instructions to follow")
        if location not in network:
            raise ValueError(f"Missing location {location}")
        left, right = network[location]
        if direction == "L":
            location = left
        elif direction == "R":
            location = right
        else:
            raise ValueError(f"Unexpected direction {direction}")
        yield step, location


def solve_part_1(instructions: str, network: Network) -> int:
    """Steps needed to get from AAA to ZZZ."""
    start = Location.parse("AAA")
    destination = Location.parse("ZZZ")
    if start == destination:
        return 0
    for step, location in _walk(start, instructions, network):
        if location == destination:
            return step
    raise AssertionError("unreachable")


def solve_one_path(start: Location, instructions: str, network: Network) -> int:
    """Steps from the start until first reaching a node ending in Z."""
    for step, location in _walk(start, instructions, network):
        if location.ends_with("Z"):
            return step
    raise AssertionError("unreachable")


def solve_part_2(instructions: str, network: Network) -> int:
    """Steps until every node ending in A is at a node ending in Z at once."""
    factors = []
    for location in network:
        if location.ends_with("A"):
            try:
                factors.append(solve_one_path(location, instructions, network))
            except ValueError:
                continue
    if not factors:
        raise ValueError("Failed to reduce")
    return reduce(math.lcm, factors)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    instructions, network = text_to_desert_map(
        Path(get_aoc_filename(argv, 2023, 8)).read_text()
    )
    print(f"Part 1: {solve_part_1(instructions, network)}")
    print(f"Part 2: {solve_part_2(instructions, network)}")