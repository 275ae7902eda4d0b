import pytest

from aocsolutions.year2024_day05 import (
    SafetyManual,
    get_middle_value,
    is_page_sorted,
    part1,
    part2,
    sort_page,
)

EXAMPLE = """1|2
1|3
1|4
1|5
2|3
2|4
2|5
3|4
3|5
4|5
5|6

1,2,3
5,4,3
1,3,5
"""


@pytest.fixture
def manual():
    return SafetyManual.parse(EXAMPLE)


def test_parse_rules_and_pages(manual):
    assert manual.page_ordering_rules[1] == {2, 3, 4, 5}
    assert manual.page_ordering_rules[5] == {6}
    assert manual.pages == [[1, 2, 3], [5, 4, 3], [1, 3, 5]]


def test_is_page_sorted(manual):
    rules = manual.page_ordering_rules
    assert is_page_sorted([1, 2, 3], rules) is True
    assert is_page_sorted([5, 4, 3], rules) is False


def test_missing_rule_raises(manual):
    with pytest.raises(KeyError):
        is_page_sorted([1, 9], manual.page_ordering_rules)


def test_middle_value():
    assert get_middle_value([7, 8, 9]) == 8


def test_sort_page(manual):
    rules = manual.page_ordering_rules
    result = sort_page([5, 4, 3], rules)
    assert result == sorted([5, 4, 3])
    assert is_page_sorted(result, rules)


def test_part1(manual):
    assert part1(manual) == 5


def test_part2(manual):
    assert part2(manual) == 4


def test_main_output(tmp_path, capsys):
    from aocsolutions.year2024_day05 import main

    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    manual = SafetyManual.parse(EXAMPLE)
    assert capsys.readouterr().out == f"Part 1: {part1(manual)}\nPart 2: {part2(manual)}\n"