"""A small opcode machine supporting add, multiply and halt."""

from __future__ import annotations

import sys
from collections.abc import Sequence

PUZZLE: tuple[int, ...] = (
    1, 0, 0, 3, 1, 1, 2, 3, 1, 3, 4, 3, 1, 5, 0, 3, 2, 1, 13, 19, 1, 10, 19, 23,
    2, 9, 23, 27, 1, 6, 27, 31, 1, 10, 31, 35, 1, 35, 10, 39, 1, 9, 39, 43, 1, 6,
    43, 47, 1, 10, 47, 51, 1, 6, 51, 55, 2, 13, 55, 59, 1, 6, 59, 63, 1, 10, 63,
    67, 2, 67, 9, 71, 1, 71, 5, 75, 1, 13, 75, 79, 2, 79, 13, 83, 1, 83, 9, 87,
    2, 10, 87, 91, 2, 91, 6, 95, 2, 13, 95, 99, 1, 10, 99, 103, 2, 9, 103, 107,
    1, 107, 5, 111, 2, 9, 111, 115, 1, 5, 115, 119, 1, 9, 119, 123, 2, 123, 6,
    127, 1, 5, 127, 131, 1, 10, 131, 135, 1, 135, 6, 139, 1, 139, 5, 143, 1, 143,
    9, 147, 1, 5, 147, 151, 1, 151, 13, 155, 1, 5, 155, 159, 1, 2, 159, 163, 1,
    163, 6, 0, 99, 2, 0, 14, 0,
)

TARGET = 19690720


def _run(memory: list[int]) -> int:
    for idx in range(0, len(memory), 4):
        opcode = memory[idx]
        if opcode == 99:
            return memory[0]
        if opcode == 1:
            memory[memory[idx + 3]] = memory[memory[idx + 1]] + memory[memory[idx + 2]]
        elif opcode == 2:
            memory[memory[idx + 3]] = memory[memory[idx + 1]] * memory[memory[idx + 2]]
        else:
            raise ValueError(f"Unknown opcode {opcode}")
    raise ValueError("Ran outside of instructions")


def solve_part_1(numbers: Sequence[int], do_1202: bool) -> int:
    """Run the program, optionally restoring the 1202 state first."""
    memory = list(numbers)
    if do_1202:
        memory[1] = 12
        memory[2] = 2
    return _run(memory)


def run_with_inputs(numbers: Sequence[int], noun: int, verb: int) -> int:
    """Run the program with the given noun and verb in positions 1 and 2."""
    memory = list(numbers)
    memory[1] = noun
    memory[2] = verb
    return _run(memory)


def solve_part_2(numbers: Sequence[int]) -> int:
    """Find noun and verb producing the target; return 100 * noun + verb."""
    for verb in range(100):
        for noun in range(100):
            try:
                result = run_with_inputs(numbers, noun, verb)
            except ValueError:
                result = 0
            if result == TARGET:
                return noun * 100 + verb
    raise ValueError("failed to find solution")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    print(f"part1: {solve_part_1(PUZZLE, True)}")
    print(f"part2: {solve_part_2(PUZZLE)}")