import pytest

from aocsolutions.year2022_day03 import (
    common_letter,
    common_letter_of_three,
    score_letter,
    solve_part1,
    solve_part2,
)

EXAMPLE = (
    "vJrwpWtwJgWrhcsFMMfFFhFp\n"
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
    "PmmdzqPrVvPwwTWBwg\n"
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
    "ttgJtRGJQctTZtZT\n"
    "CrZsJsPPZsGzwwsLwLmpwMDw"
)


def test_solve_example_part1():
    assert solve_part1(EXAMPLE.splitlines()) == 157


def test_solve_example_part2():
    assert solve_part2(EXAMPLE.splitlines()) == 70


@pytest.mark.parametrize(
    "line, expected",
    [
        ("vJrwpWtwJgWrhcsFMMfFFhFp", "p"),
        ("jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL", "L"),
        ("PmmdzqPrVvPwwTWBwg", "P"),
        ("wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn", "v"),
        ("ttgJtRGJQctTZtZT", "t"),
        ("CrZsJsPPZsGzwwsLwLmpwMDw", "s"),
    ],
)
def test_common_letter(line, expected):
    assert common_letter(line) == expected


@pytest.mark.parametrize(
    "letter, expected",
    [("p", 16), ("L", 38), ("P", 42), ("v", 22), ("t", 20), ("s", 19)],
)
def test_score_letter(letter, expected):
    assert score_letter(letter) == expected


def test_common_letter_of_three():
    assert common_letter_of_three(
        "vJrwpWtwJgWrhcsFMMfFFhFp",
        "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
        "PmmdzqPrVvPwwTWBwg",
    ) == "r"
    assert common_letter_of_three(
        "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
        "ttgJtRGJQctTZtZT",
        "CrZsJsPPZsGzwwsLwLmpwMDw",
    ) == "Z"


def test_incomplete_group_is_ignored():
    lines = EXAMPLE.splitlines()
    assert solve_part2(lines[:5]) == solve_part2(lines[:3])


def test_no_common_letter_raises():
    with pytest.raises(ValueError):
        common_letter("abcd")