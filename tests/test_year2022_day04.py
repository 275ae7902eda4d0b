import pytest

from aocsolutions.year2022_day04 import (
    line_minus,
    line_to_ranges,
    overlaps_at_all,
    overlaps_completely,
    solve_part1,
    solve_part2,
)


def test_line_minus():
    assert line_minus("2-4") == range(2, 5)


def test_line_to_ranges():
    assert line_to_ranges("2-4,6-8") == (range(2, 5), range(6, 9))
    assert line_to_ranges("2-3,4-5") == (range(2, 4), range(4, 6))


def test_overlap_completely():
    assert overlaps_completely(range(2, 9), range(3, 8))
    assert not overlaps_completely(range(2, 5), range(6, 9))


def test_overlap_at_all():
    assert overlaps_at_all(range(5, 8), range(7, 10))
    assert not overlaps_at_all(range(2, 4), range(4, 6))


def test_solve_part1_counts_contained_pairs():
    text = "2-8,3-7\n2-4,6-8\n6-6,4-6"
    assert solve_part1(text) == 2


def test_contained_implies_overlapping():
    text = "2-8,3-7\n2-4,6-8\n6-6,4-6\n5-7,7-9"
    assert solve_part2(text) >= solve_part1(text)
    for line in text.splitlines():
        a, b = line_to_ranges(line)
        if overlaps_completely(a, b):
            assert overlaps_at_all(a, b)


def test_bad_input_raises():
    with pytest.raises(ValueError):
        line_minus("x-4")
    with pytest.raises(ValueError):
        line_to_ranges("2-4")