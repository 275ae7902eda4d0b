"""Camel cards: ranking poker-like hands, with and without jokers."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


class Card(Enum):
    """A card, valued by the symbol it is written as."""

    ACE = "A"
    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    C10 = "T"
    C9 = "9"
    C8 = "8"
    C7 = "7"
    C6 = "6"
    C5 = "5"
    C4 = "4"
    C3 = "3"
    C2 = "2"


class Hand(Enum):
    """Hand types, strongest first."""

    FIVE_OF_A_KIND = 0
    FOUR_OF_A_KIND = 1
    FULL_HOUSE = 2
    THREE_OF_A_KIND = 3
    TWO_PAIRS = 4
    PAIR = 5
    HIGH_CARD = 6


@dataclass(frozen=True)
class Play:
    cards: tuple[Card, ...]
    bet: int


_PART_1_VALUES: dict[Card, int] = {
    Card(symbol): value for value, symbol in enumerate("23456789TJQKA", start=2)
}
_PART_2_VALUES: dict[Card, int] = {**_PART_1_VALUES, Card.JACK: 1}


def parse_card(symbol: str) -> Card:
    """Decode a card symbol."""
    try:
        return Card(symbol)
    except ValueError:
        raise ValueError(f"Not a card {symbol}") from None


def line_to_play(line: str) -> Play:
    """Parse '32T3K 765' into five cards and a bet."""
    words = line.split()
    if len(words) < 2:
        raise ValueError(f"expected cards and a bet: {line!r}")
    symbols = words[0]
    if len(symbols) < 5:
        raise ValueError(f"expected five cards: {symbols!r}")
    cards = tuple(parse_card(symbol) for symbol in symbols[:5])
    return Play(cards, int(words[1]))


def text_to_plays(text: str) -> list[Play]:
    return [line_to_play(line) for line in text.splitlines()]


def _classify(top: int, second: int) -> Hand:
    if top >= 5:
        return Hand.FIVE_OF_A_KIND
    if top == 4:
        return Hand.FOUR_OF_A_KIND
    if top == 3 and second == 2:
        return Hand.FULL_HOUSE
    if top == 3:
        return Hand.THREE_OF_A_KIND
    if top == 2 and second == 2:
        return Hand.TWO_PAIRS
    if top == 2:
        return Hand.PAIR
    return Hand.HIGH_CARD


def play_to_hand_part_1(play: Play) -> Hand:
    """The type of the hand with jacks as ordinary cards."""
    counts = sorted(Counter(play.cards).values(), reverse=True)
    second = counts[1] if len(counts) > 1 else 0
    return _classify(counts[0], second)


def play_to_hand_part_2(play: Play) -> Hand:
    """The type of the hand with jacks as jokers that join the largest group."""
    jokers = sum(1 for card in play.cards if card is Card.JACK)
    counts = sorted(
        Counter(card for card in play.cards if card is not Card.JACK).values(),
        reverse=True,
    )
    if len(counts) <= 1:
        return Hand.FIVE_OF_A_KIND
    top = counts[0] + jokers
    if top >= 5:
        return Hand.HIGH_CARD if top != 4 and top > 5 else _classify(top, counts[1])
    return _classify(top, counts[1])


def _winnings(
    plays: Sequence[Play],
    hand_of: Callable[[Play], Hand],
    values: Mapping[Card, int],
) -> int:
    ranked = sorted(
        plays,
        key=lambda play: (-hand_of(play).value, tuple(values[c] for c in play.cards)),
    )
    return sum(rank * play.bet for rank, play in enumerate(ranked, start=1))


def solve_part_1(plays: Sequence[Play]) -> int:
    """Total winnings: each bet times the rank of its hand."""
    return _winnings(plays, play_to_hand_part_1, _PART_1_VALUES)


def solve_part_2(plays: Sequence[Play]) -> int:
    """Total winnings with jacks as jokers."""
    return _winnings(plays, play_to_hand_part_2, _PART_2_VALUES)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    plays = text_to_plays(Path(get_aoc_filename(argv, 2023, 7)).read_text())
    print(f"Part 1 {solve_part_1(plays)}")
    print(f"Part 2 {solve_part_2(plays)}")