"""Cube conundrum: possible games and the power of the minimal cube sets."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14


@dataclass(frozen=True)
class Pick:
    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class Game:
    id: int
    picks: list[Pick] = field(default_factory=list)


def text_to_pick(text: str) -> Pick:
    """Parse '3 blue, 4 red' into a pick."""
    colors = {"red": 0, "green": 0, "blue": 0}
    for big_part in text.split(","):
        parts = big_part.strip().split(" ")
        amount = int(parts[0].strip())
        if len(parts) > 1:
            color = parts[1].strip()
            if color not in colors:
                raise ValueError(f"unknown color {color}")
            colors[color] = amount
    return Pick(**colors)


def line_to_game(line: str) -> Game:
    """Parse 'Game 1: 3 blue, 4 red; 2 green' into a game."""
    parts = line.split(":")
    game_id = int(parts[0].split(" ")[-1].strip())
    if len(parts) < 2:
        raise ValueError("Missing picks")
    return Game(game_id, [text_to_pick(p) for p in parts[1].split(";")])


def parse_to_games(text: str) -> list[Game]:
    return [line_to_game(line) for line in text.splitlines()]


def _within_parameters(game: Game) -> bool:
    return not any(
        p.red > MAX_RED or p.green > MAX_GREEN or p.blue > MAX_BLUE for p in game.picks
    )


def part_1(games: Sequence[Game]) -> int:
    """Sum the ids of the games possible with the bag's cubes."""
    return sum(game.id for game in games if _within_parameters(game))


def biggest_pick(picks: Sequence[Pick]) -> Pick:
    """The fewest cubes of each colour that make all picks possible."""
    return Pick(
        red=max((p.red for p in picks), default=0),
        green=max((p.green for p in picks), default=0),
        blue=max((p.blue for p in picks), default=0),
    )


def power_pick(pick: Pick) -> int:
    return pick.red * pick.green * pick.blue


def part_2(games: Sequence[Game]) -> int:
    return sum(power_pick(biggest_pick(game.picks)) for game in games)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    games = parse_to_games(Path(get_aoc_filename(argv, 2023, 2)).read_text())
    print(f"Part 1: {part_1(games)}")
    print(f"Part 2: {part_2(games)}")