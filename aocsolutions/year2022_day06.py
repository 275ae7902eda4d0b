"""Tuning trouble: find the first marker of distinct characters."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


def is_this_it(letters: Sequence[str]) -> bool:
    """True when no character occurs twice in the window."""
    return len(set(letters)) == len(letters)


def day6(text: str, different_letters: int) -> int:
    """Return the position just after the first window of distinct characters.

    When no such window is found before the end, the length of the text is
    returned.
    """
    answer = 0
    while answer + different_letters < len(text) and not is_this_it(
        text[answer:answer + different_letters]
    ):
        answer += 1
    return answer + different_letters


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2022, 6)).read_text()
    print(f"part1 {day6(text, 4)}")
    print(f"part2 {day6(text, 14)}")