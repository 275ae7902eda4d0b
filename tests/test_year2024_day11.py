import pytest

from aocsolutions.year2024_day11 import (
    blink_counts,
    blink_list,
    blink_many_times,
    blink_many_times_list,
    counts_from_list,
)

BLINKS = [
    [125, 17],
    [253000, 1, 7],
    [253, 0, 2024, 14168],
    [512072, 1, 20, 24, 28676032],
    [512, 72, 2024, 2, 0, 2, 4, 2867, 6032],
    [1036288, 7, 2, 20, 24, 4048, 1, 4048, 8096, 28, 67, 60, 32],
    [2097446912, 14168, 4048, 2, 0, 2, 4, 40, 48, 2024, 40, 48, 80, 96, 2, 8, 6, 7, 6, 0, 3, 2],
]


@pytest.mark.parametrize("times, expected", [(6, 22), (25, 55312)])
def test_blink_many_list(times, expected):
    assert blink_many_times_list("125 17", times) == expected


@pytest.mark.parametrize("times, expected", [(6, 22), (25, 55312)])
def test_blink_many_counts(times, expected):
    assert blink_many_times("125 17", times) == expected


@pytest.mark.parametrize("before, after", list(zip(BLINKS, BLINKS[1:])))
def test_blink_list_steps(before, after):
    assert blink_list(before) == after


@pytest.mark.parametrize("before, after", list(zip(BLINKS, BLINKS[1:])))
def test_blink_counts_steps(before, after):
    assert blink_counts(counts_from_list(before)) == counts_from_list(after)


def test_counts_from_list_groups_duplicates():
    assert counts_from_list([2, 0, 2]) == {2: 2, 0: 1}


def test_unparsable_words_are_ignored():
    assert blink_many_times("125  17 x", 6) == 22