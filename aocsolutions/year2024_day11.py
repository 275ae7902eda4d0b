"""Plutonian pebbles: stones that split or multiply on every blink."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from aocsolutions.puzzle import read_puzzle

_NUMBER_RE = re.compile(r"\+?[0-9]+")


def _text_to_numbers(text: str) -> list[int]:
    return [int(word) for word in text.strip().split(" ") if _NUMBER_RE.fullmatch(word)]


def _transform(number: int) -> tuple[int, ...]:
    if number == 0:
        return (1,)
    digits = str(number)
    if len(digits) % 2 == 0:
        divider = 10 ** (len(digits) // 2)
        return number // divider, number % divider
    return (number * 2024,)


def blink_list(arrangement: Sequence[int]) -> list[int]:
    """Apply one blink to the stones, keeping their order."""
    return [new for number in arrangement for new in _transform(number)]


def counts_from_list(numbers: Iterable[int]) -> dict[int, int]:
    """How many stones carry each number."""
    return dict(Counter(numbers))


def blink_counts(arrangement: Mapping[int, int]) -> dict[int, int]:
    """Apply one blink to stones grouped by number."""
    result: dict[int, int] = {}
    for number, count in arrangement.items():
        for new in _transform(number):
            result[new] = result.get(new, 0) + count
    return result


def blink_many_times_list(text: str, times: int) -> int:
    """Number of stones after blinking, tracking every stone."""
    arrangement = _text_to_numbers(text)
    for _ in range(times):
        arrangement = blink_list(arrangement)
    return len(arrangement)


def blink_many_times(text: str, times: int) -> int:
    """Number of stones after blinking, tracking counts per number."""
    arrangement = counts_from_list(_text_to_numbers(text))
    for _ in range(times):
        arrangement = blink_counts(arrangement)
    return sum(arrangement.values())


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = read_puzzle("year2024_day11", argv).strip()
    print(f"Part 1: {blink_many_times_list(text, 25)}")
    print(f"Part 2: {blink_many_times(text, 75)}")