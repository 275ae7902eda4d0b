"""Scratchcards: points per card and the cascade of won copies."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


@dataclass(frozen=True)
class Card:
    """A card with its winning numbers and the numbers the player has."""

    id: int
    winning: frozenset[int] = field(default_factory=frozenset)
    player: frozenset[int] = field(default_factory=frozenset)

    def matches(self) -> int:
        """How many of the player's numbers are winning numbers."""
        return len(self.winning & self.player)


def _line_to_numbers(text: str) -> frozenset[int]:
    numbers = set()
    for word in text.split(" "):
        if not word:
            continue
        value = int(word)
        if not 0 <= value <= 255:
            raise ValueError(f"number out of range: {value}")
        numbers.add(value)
    return frozenset(numbers)


def line_to_card(line: str) -> Card:
    """Parse 'Card 1: 41 48 | 83 86' into a card."""
    parts = re.split(r"[:|]", line)
    if len(parts) < 2:
        raise ValueError("Missing winning")
    if len(parts) < 3:
        raise ValueError("Missing player")
    card_id = int(parts[0].split(" ")[-1])
    return Card(card_id, _line_to_numbers(parts[1]), _line_to_numbers(parts[2]))


def parse(text: str) -> list[Card]:
    return [line_to_card(line) for line in text.splitlines()]


def score_card(card: Card) -> int:
    """One point for the first match, doubled for every further match."""
    matches = card.matches()
    return 0 if matches == 0 else 2 ** (matches - 1)


def solve_part_1(cards: Sequence[Card]) -> int:
    return sum(score_card(card) for card in cards)


def solve_part_2(cards: Sequence[Card]) -> int:
    """Count all cards, including the copies won by matching numbers."""
    extra: dict[int, int] = {}
    total = 0
    for card in cards:
        count = 1 + extra.get(card.id, 0)
        total += count
        for won in range(card.id + 1, card.id + 1 + card.matches()):
            extra[won] = extra.get(won, 0) + count
    return total


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    cards = parse(Path(get_aoc_filename(argv, 2023, 4)).read_text())
    print(f"Part 1: {solve_part_1(cards)}")
    print(f"Part 2: {solve_part_2(cards)}")