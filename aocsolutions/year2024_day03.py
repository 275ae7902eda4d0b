"""Mull it over: summing products of well-formed mul instructions."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

_MUL_RE = re.compile(r"(mul\((\d+),(\d+)\))")
_INSTRUCTION_RE = re.compile(r"(mul\((\d+),(\d+)\))|(do\(\))|don't\(\)")


def part_1(text: str) -> int:
    """Sum the products of every mul(a,b)."""
    return sum(int(m.group(2)) * int(m.group(3)) for m in _MUL_RE.finditer(text))


def part_2(text: str) -> int:
    """Sum the products of mul(a,b) while the last switch seen was do()."""
    enabled = True
    total = 0
    for match in _INSTRUCTION_RE.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(2)) * int(match.group(3))
    return total


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2024, 3)).read_text()
    print(f"Part 1: {part_1(text)}")
    print(f"Part 2: {part_2(text)}")