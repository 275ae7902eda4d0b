"""Supply stacks: crane moves one crate at a time or many at once."""

from __future__ import annotations

import re
import sys
from collections import deque
from pathlib import Path
from typing import NamedTuple

from aocsolutions.puzzle import get_aoc_filename

Stack = deque  # front of the deque is the top crate
Stacks = list[deque]

_MOVE_RE = re.compile(r"^move (?P<amount>[0-9]+) from (?P<source>[0-9]+) to (?P<target>[0-9])$")


class Move(NamedTuple):
    amount: int
    source: int
    target: int


def _parse_stacks(stack_text: str) -> Stacks:
    lines = stack_text.splitlines()
    if not lines:
        raise ValueError("no stack drawing")
    num_stacks = int(lines[-1].split()[-1])
    stacks: Stacks = [deque() for _ in range(num_stacks)]

    for line in lines:
        idx = 0
        while line and not line.startswith(" 1 "):
            part, line = line[:4], line[4:]
            crate = part[1]
            if not crate.isspace():
                stacks[idx].append(crate)
            idx += 1
    return stacks


def _parse_moves(move_text: str) -> list[Move]:
    moves = []
    for line in move_text.splitlines():
        match = _MOVE_RE.match(line)
        if match is None:
            raise ValueError(f"not a move: {line!r}")
        moves.append(Move(int(match["amount"]), int(match["source"]), int(match["target"])))
    return moves


def parse_text(text: str) -> tuple[Stacks, list[Move]]:
    """Split the drawing of the stacks from the list of moves and parse both."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("missing blank line between stacks and moves")
    return _parse_stacks(sections[0]), _parse_moves(sections[1])


def stacks_to_answer(stacks: Stacks) -> str:
    """Return the top crate of every stack."""
    return "".join(stack[0] for stack in stacks)


def part1(text: str) -> str:
    """Move crates one at a time."""
    stacks, moves = parse_text(text)
    for amount, source, target in moves:
        for _ in range(amount):
            stacks[target - 1].appendleft(stacks[source - 1].popleft())
    return stacks_to_answer(stacks)


def part2(text: str) -> str:
    """Move crates several at once, keeping their order."""
    stacks, moves = parse_text(text)
    for amount, source, target in moves:
        lifted = [stacks[source - 1].popleft() for _ in range(amount)]
        stacks[target - 1].extendleft(reversed(lifted))
    return stacks_to_answer(stacks)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2022, 5)).read_text()
    print(f"part1: {part1(text)}")
    print(f"part2: {part2(text)}")