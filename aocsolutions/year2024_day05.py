"""Print queue: page ordering rules and the middle pages of updates."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

Rules = dict[int, set[int]]


def _int_or_zero(word: str) -> int:
    try:
        return int(word)
    except ValueError:
        return 0


@dataclass
class SafetyManual:
    """Ordering rules (page -> pages that must follow it) and the updates."""

    page_ordering_rules: Rules = field(default_factory=dict)
    pages: list[list[int]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> SafetyManual:
        lines = iter(text.splitlines())
        rules: Rules = {}
        for line in lines:
            if not line:
                break
            parts = line.split("|")
            left = _int_or_zero(parts[0])
            right = _int_or_zero(parts[1]) if len(parts) > 1 else 0
            rules.setdefault(left, set()).add(right)
        pages = [[int(word) for word in line.split(",")] for line in lines]
        return cls(rules, pages)


def is_page_sorted(page: Sequence[int], rules: Rules) -> bool:
    """True when no page is required to come before an earlier one."""
    for i, left in enumerate(page):
        if any(left in rules[right] for right in page[i + 1:]):
            return False
    return True


def get_middle_value(page: Sequence[int]) -> int:
    return page[len(page) // 2]


def sort_page(page: Sequence[int], rules: Rules) -> list[int]:
    """Return the pages reordered according to the rules."""

    def compare(left: int, right: int) -> int:
        return -1 if right in rules[left] else 1

    return sorted(page, key=cmp_to_key(compare))


def part1(manual: SafetyManual) -> int:
    """Sum the middle pages of the correctly ordered updates."""
    rules = manual.page_ordering_rules
    return sum(get_middle_value(p) for p in manual.pages if is_page_sorted(p, rules))


def part2(manual: SafetyManual) -> int:
    """Sum the middle pages of the wrongly ordered updates once sorted."""
    rules = manual.page_ordering_rules
    return sum(
        get_middle_value(sort_page(p, rules))
        for p in manual.pages
        if not is_page_sorted(p, rules)
    )


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    manual = SafetyManual.parse(Path(get_aoc_filename(argv, 2024, 5)).read_text())
    print(f"Part 1: {part1(manual)}")
    print(f"Part 2: {part2(manual)}")