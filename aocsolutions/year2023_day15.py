"""Lens library: the HASH algorithm and the HASHMAP procedure."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

_INSTRUCTION_RE = re.compile(r"(\w+)([-=])(\d*)")


@dataclass
class Lens:
    name: str
    focal_length: int


def holiday_hash(part: str) -> int:
    """Hash a string into a box number 0..255."""
    value = 0
    for ch in part:
        value = ((value + (ord(ch) & 0xFF)) * 17) & 0xFF
    return value


def solve_part_1(text: str) -> int:
    """Sum of the hashes of every comma-separated step."""
    return sum(holiday_hash(part) for part in text.split(","))


def part_to_instructions(part: str) -> tuple[int, str, Lens]:
    """Parse 'rn=1' or 'cm-' into (box, operator, lens)."""
    match = _INSTRUCTION_RE.search(part)
    if match is None:
        raise ValueError(f"not an instruction: {part!r}")
    name, operator, digits = match.groups()
    try:
        value = int(digits)
    except ValueError:
        value = 0
    if not 0 <= value <= 255:
        value = 0
    return holiday_hash(name), operator, Lens(name, value)


def arrange_boxes(text: str) -> dict[int, list[Lens]]:
    """Apply every step to the 256 boxes and return their contents."""
    boxes: dict[int, list[Lens]] = {box: [] for box in range(256)}
    for part in text.split(","):
        box, operator, lens = part_to_instructions(part)
        lenses = boxes[box]
        if operator == "-":
            boxes[box] = [l for l in lenses if l.name != lens.name]
            continue
        existing = next((l for l in lenses if l.name == lens.name), None)
        if existing is None:
            lenses.append(lens)
        else:
            existing.focal_length = lens.focal_length
    return boxes


def score_box(box: int, lenses: Sequence[Lens]) -> int:
    """Focusing power of the lenses in one box."""
    return sum(
        (box + 1) * slot * lens.focal_length
        for slot, lens in enumerate(lenses, start=1)
    )


def solve_part_2(text: str) -> int:
    return sum(score_box(box, lenses) for box, lenses in arrange_boxes(text).items())


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2023, 15)).read_text().strip()
    print(f"Part 1: {solve_part_1(text)}")
    print(f"Part 2: {solve_part_2(text)}")