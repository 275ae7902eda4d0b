from aocsolutions.year2018_day01 import main, solve_part_1, solve_part_2


def test_part_1():
    assert solve_part_1("+1\n+1\n+1") == 3
    assert solve_part_1("+1\n+1\n-2") == 0


def test_part_1_ignores_unparsable_lines():
    assert solve_part_1("+1\nabc\n+1\n+1") == 3


def test_part_2():
    assert solve_part_2("+1\n-1") == 0
    assert solve_part_2("+3\n+3\n+4\n-2\n-4") == 10
    assert solve_part_2("-6\n+3\n+8\n+5\n-6") == 5
    assert solve_part_2("+7\n+7\n-2\n-7\n-4") == 14


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("+1\n-1\n")
    main([str(path)])
    assert capsys.readouterr().out == "Part 1: 0\nPart 2: 0\n"