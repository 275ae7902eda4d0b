# aocsolutions

Solutions to a selection of Advent of Code puzzles, one module per day,
each with a command that prints the answers to both parts.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a day

Every solved day has a command named `aoc-<year>-<day>`:

```
aoc-2023-01 my_input.txt
aoc-2024-11 my_input.txt
```

The first argument is the file holding your puzzle input. Without it, the
command looks for a default file under `puzzles/` in the current directory.
For most days that file is named after the year and the unpadded day, for
example `puzzles/year2023_day1.txt`. Two days differ: `aoc-2022-03` reads
`puzzles/year2022-day3.txt` and `aoc-2024-11` reads
`puzzles/year2024_day11.txt`.

A few days carry their input inside the module and need no file:
`aoc-2019-02`, `aoc-2019-04` and `aoc-2023-06`.

`aoc-2019-08` also draws the decoded image in the terminal after the answer
to part 1.

Available commands:

| Year | Days |
|------|------|
| 2018 | `aoc-2018-01`, `aoc-2018-02`, `aoc-2018-07` |
| 2019 | `aoc-2019-01`, `aoc-2019-02`, `aoc-2019-04`, `aoc-2019-08` |
| 2022 | `aoc-2022-03` to `aoc-2022-07` |
| 2023 | `aoc-2023-01` to `aoc-2023-09`, `aoc-2023-15` |
| 2024 | `aoc-2024-01` to `aoc-2024-05`, `aoc-2024-09`, `aoc-2024-11`, `aoc-2024-13` |

## Using the solvers from Python

Each module exposes its parsing and solving functions, so they can be called
on any text:

```python
from aocsolutions import year2022_day06, year2023_day15

year2022_day06.day6("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4)   # 7
year2023_day15.holiday_hash("rn=1")                         # 30
```

Shared helpers live in `aocsolutions.puzzle` (`get_aoc_filename` and
`read_puzzle` for finding and reading input files) and
`aocsolutions.charmap` (`text_to_char_map`, mapping each character of a text
grid to the set of `Position`s where it occurs).

## What is not included

There is no solver for 2022 day 2 (rock, paper, scissors) or for 2024 day 18
(the path search through a corrupted memory grid), and no commands for them.
The package has no module of terminal colour codes or cursor movement.