"""No space left on device: directory sizes from a terminal transcript."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

LIMIT = 100_000
MAX_SIZE = 70_000_000 - 30_000_000


def folder_sizes(text: str) -> list[int]:
    """Return the total size of every directory that contains files."""
    dir_sizes: dict[tuple[str, ...], int] = {}
    cwd: list[str] = []

    for line in text.splitlines():
        if line == "$ ls" or line.startswith("dir "):
            continue
        if line.startswith("$ cd "):
            words = line.split()
            if len(words) < 3:
                raise ValueError(f"cd without a directory: {line!r}")
            if words[2] == "..":
                if cwd:
                    cwd.pop()
            else:
                cwd.append(words[2])
            continue

        words = line.split()
        if not words:
            raise ValueError("empty line in transcript")
        size = int(words[0])
        for depth in range(len(cwd), 0, -1):
            key = tuple(cwd[:depth])
            dir_sizes[key] = dir_sizes.get(key, 0) + size

    return list(dir_sizes.values())


def part_1(dir_sizes: Sequence[int]) -> int:
    """Sum the sizes of directories below the limit."""
    return sum(size for size in dir_sizes if size < LIMIT)


def part_2(dir_sizes: Sequence[int]) -> int:
    """Size of the smallest directory whose removal frees enough space."""
    total_size = max(dir_sizes)
    return min(size for size in dir_sizes if total_size - size <= MAX_SIZE)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2022, 7)).read_text()
    sizes = folder_sizes(text)
    print(f"part 1 {part_1(sizes)}")
    print(f"part 2 {part_2(sizes)}")