import pytest

from aocsolutions.year2023_day02 import (
    Game,
    Pick,
    biggest_pick,
    line_to_game,
    parse_to_games,
    part_1,
    part_2,
    power_pick,
    text_to_pick,
)

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 8 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_parse_game():
    assert line_to_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green") == Game(
        id=1,
        picks=[
            Pick(red=4, green=0, blue=3),
            Pick(red=1, green=2, blue=6),
            Pick(red=0, green=2, blue=0),
        ],
    )


def test_part_1_example():
    assert part_1(parse_to_games(EXAMPLE)) == 8


def test_biggest_pick_and_power():
    picks = [Pick(4, 0, 3), Pick(1, 2, 6), Pick(0, 2, 0)]
    biggest = biggest_pick(picks)
    assert biggest == Pick(4, 2, 6)
    assert power_pick(biggest) == 48


def test_unknown_color_raises():
    with pytest.raises(ValueError):
        text_to_pick(" 3 purple")


def test_missing_picks_raises():
    with pytest.raises(ValueError):
        line_to_game("Game 1")


def test_bad_id_raises():
    with pytest.raises(ValueError):
        line_to_game("Game x: 1 red")