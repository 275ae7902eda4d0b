import pytest

from aocsolutions.year2022_day06 import day6, is_this_it, main


@pytest.mark.parametrize(
    "text, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11),
    ],
)
def test_part1(text, expected):
    assert day6(text, 4) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 19),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 26),
    ],
)
def test_part2(text, expected):
    assert day6(text, 14) == expected


def test_is_this_it():
    assert is_this_it("abcd") is True
    assert is_this_it("abca") is False


def test_no_marker_returns_length():
    text = "aaaaaa"
    assert day6(text, 4) == len(text)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("mjqjpqmgbljsphdztnvjfqwrcgsmlb")
    main([str(path)])
    out = capsys.readouterr().out
    assert "part1 7" in out
    assert "part2 19" in out