"""Disk fragmenter: compacting files on a disk map and computing its checksum."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename


@dataclass
class File:
    """A file occupying size blocks from start on."""

    block_id: int
    start: int
    size: int


@dataclass
class Space:
    """A run of free blocks."""

    start: int
    size: int


@dataclass
class DiskData:
    """The blocks of a disk (file id or None) with its files and free runs."""

    blocks: list[int | None] = field(default_factory=list)
    files: list[File] = field(default_factory=list)
    spaces: list[Space] = field(default_factory=list)


def text_to_diskmap(text: str) -> DiskData:
    """Expand the dense disk map: digits alternate file sizes and free sizes."""
    data = DiskData()
    position = 0
    for idx, ch in enumerate(text):
        if not "0" <= ch <= "9":
            raise ValueError(f"not a digit: {ch!r}")
        size = int(ch)
        if idx % 2 == 0:
            block_id = idx // 2
            data.files.append(File(block_id, position, size))
            data.blocks.extend([block_id] * size)
        else:
            data.spaces.append(Space(position, size))
            data.blocks.extend([None] * size)
        position += size
    return data


def calculate_checksum(blocks: Sequence[int | None]) -> int:
    """Sum of each block's position times its file id; free blocks count zero."""
    return sum(index * block for index, block in enumerate(blocks) if block is not None)


def part1(disk_data: DiskData) -> int:
    """Move file blocks one at a time into the leftmost free block."""
    blocks = list(disk_data.blocks)
    files = [File(f.block_id, f.start, f.size) for f in reversed(disk_data.files)]
    if not files:
        raise ValueError("no files on disk")
    remaining = iter(files)
    current = next(remaining)

    for idx, block in enumerate(blocks):
        if block is not None:
            continue
        while current.size == 0 or idx >= current.start:
            following = next(remaining, None)
            if following is None or following.block_id == 0:
                return calculate_checksum(blocks)
            current = following
        blocks[idx] = current.block_id
        if current.start < len(blocks):
            blocks[current.start] = None
        current.size -= 1
        current.start += 1

    return calculate_checksum(blocks)


def part2(disk_data: DiskData) -> int:
    """Move whole files, highest id first, into the leftmost free run that fits."""
    blocks = list(disk_data.blocks)
    spaces = [Space(s.start, s.size) for s in disk_data.spaces]

    for file in reversed(disk_data.files):
        space = next(
            (s for s in spaces if s.size >= file.size and s.start < file.start),
            None,
        )
        if space is None:
            continue
        for position in range(space.start, min(space.start + file.size, len(blocks))):
            blocks[position] = file.block_id
        for position in range(file.start, min(file.start + file.size, len(blocks))):
            blocks[position] = None
        if space.size == file.size:
            spaces.remove(space)
        else:
            space.start += file.size
            space.size -= file.size

    return calculate_checksum(blocks)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2024, 9)).read_text().strip()
    print(f"Part 1: {part1(text_to_diskmap(text))}")
    print(f"Part 2: {part2(text_to_diskmap(text))}")