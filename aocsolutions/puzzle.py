"""Locating and reading puzzle input files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


def get_aoc_filename(argv: Sequence[str], year: int, day: int) -> str:
    """Return the first argument as filename, or the default for the given day."""
    if argv:
        return argv[0]
    return f"puzzles/year{year}_day{day}.txt"


def read_puzzle(name: str, argv: Sequence[str]) -> str:
    """Read the file named by the first argument, or puzzles/<name>.txt."""
    filename = argv[0] if argv else f"puzzles/{name}.txt"
    return Path(filename).read_text()