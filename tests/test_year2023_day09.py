import pytest

from aocsolutions.year2023_day09 import (
    extrapolate_backward,
    extrapolate_forward,
    solve_part_1,
    solve_part_2,
    text_to_numbers,
)

EXAMPLE = "0 3 6 9 12 15\n1 3 6 10 15 21\n10 13 16 21 30 45"


@pytest.mark.parametrize(
    "line, expected",
    [
        ([0, 3, 6, 9, 12, 15], 18),
        ([1, 3, 6, 10, 15, 21], 28),
        ([10, 13, 16, 21, 30, 45], 68),
    ],
)
def test_forward(line, expected):
    assert extrapolate_forward(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ([0, 3, 6, 9, 12, 15], -3),
        ([1, 3, 6, 10, 15, 21], 0),
        ([10, 13, 16, 21, 30, 45], 5),
    ],
)
def test_backward(line, expected):
    assert extrapolate_backward(line) == expected


def test_parse():
    assert text_to_numbers(EXAMPLE)[0] == [0, 3, 6, 9, 12, 15]
    assert len(text_to_numbers(EXAMPLE)) == 3


def test_solve_parts():
    numbers = text_to_numbers(EXAMPLE)
    assert solve_part_1(numbers) == 18 + 28 + 68
    assert solve_part_2(numbers) == -3 + 0 + 5


def test_empty_line_raises():
    with pytest.raises(ValueError):
        extrapolate_forward([])