"""Password rules: six non-decreasing digits containing a double."""

from __future__ import annotations

import sys
from itertools import groupby

LOWER = 256310
UPPER = 732736


def password_to_digits(password: int) -> tuple[int, ...]:
    """Return the six decimal digits of the password, most significant first."""
    return tuple((password // 10**power) % 10 for power in range(5, -1, -1))


def _never_decreases(digits: tuple[int, ...]) -> bool:
    return all(a <= b for a, b in zip(digits, digits[1:]))


def is_valid_password_part_1(password: int) -> bool:
    """Digits never decrease and at least two adjacent digits are equal."""
    digits = password_to_digits(password)
    if not _never_decreases(digits):
        return False
    return any(a == b for a, b in zip(digits, digits[1:]))


def is_valid_password_part_2(password: int) -> bool:
    """Digits never decrease and some digit appears in a run of exactly two."""
    digits = password_to_digits(password)
    if not _never_decreases(digits):
        return False
    return any(len(list(run)) == 2 for _, run in groupby(digits))


def solve_part_1(lower: int, upper: int) -> int:
    """Count the valid passwords in the inclusive range."""
    return sum(1 for p in range(lower, upper + 1) if is_valid_password_part_1(p))


def solve_part_2(lower: int, upper: int) -> int:
    """Count the passwords in the inclusive range valid under the stricter rule."""
    return sum(1 for p in range(lower, upper + 1) if is_valid_password_part_2(p))


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    print(f"part1 {solve_part_1(LOWER, UPPER)}")
    print(f"part2 {solve_part_2(LOWER, UPPER)}")