[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2018, 2019 and 2022 to 2024, with a command for each day"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2018-01 = "aocsolutions.year2018_day01:main"
aoc-2018-02 = "aocsolutions.year2018_day02:main"
aoc-2018-07 = "aocsolutions.year2018_day07:main"
aoc-2019-01 = "aocsolutions.year2019_day01:main"
aoc-2019-02 = "aocsolutions.year2019_day02:main"
aoc-2019-04 = "aocsolutions.year2019_day04:main"
aoc-2019-08 = "aocsolutions.year2019_day08:main"
aoc-2022-03 = "aocsolutions.year2022_day03:main"
aoc-2022-04 = "aocsolutions.year2022_day04:main"
aoc-2022-05 = "aocsolutions.year2022_day05:main"
aoc-2022-06 = "aocsolutions.year2022_day06:main"
aoc-2022-07 = "aocsolutions.year2022_day07:main"
aoc-2023-01 = "aocsolutions.year2023_day01:main"
aoc-2023-02 = "aocsolutions.year2023_day02:main"
aoc-2023-03 = "aocsolutions.year2023_day03:main"
aoc-2023-04 = "aocsolutions.year2023_day04:main"
aoc-2023-05 = "aocsolutions.year2023_day05:main"
aoc-2023-06 = "aocsolutions.year2023_day06:main"
aoc-2023-07 = "aocsolutions.year2023_day07:main"
aoc-2023-08 = "aocsolutions.year2023_day08:main"
aoc-2023-09 = "aocsolutions.year2023_day09:main"
aoc-2023-15 = "aocsolutions.year2023_day15:main"
aoc-2024-01 = "aocsolutions.year2024_day01:main"
aoc-2024-02 = "aocsolutions.year2024_day02:main"
aoc-2024-03 = "aocsolutions.year2024_day03:main"
aoc-2024-04 = "aocsolutions.year2024_day04:main"
aoc-2024-05 = "aocsolutions.year2024_day05:main"
aoc-2024-09 = "aocsolutions.year2024_day09:main"
aoc-2024-11 = "aocsolutions.year2024_day11:main"
aoc-2024-13 = "aocsolutions.year2024_day13:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.hatch.build.targets.sdist]
include = ["aocsolutions", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
