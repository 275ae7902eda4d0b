"""Claw contraption: button presses needed to reach each prize."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

UNIT_CONVERSION_ERROR = 10_000_000_000_000


@dataclass
class XY:
    x: int
    y: int

    @classmethod
    def parse(cls, line: str) -> XY:
        """Parse 'Button A: X+94, Y+34' or 'Prize: X=8400, Y=5400'."""
        parts = line.split(": ")
        if len(parts) < 2:
            raise ValueError(f"not a coordinate line: {line!r}")
        values = [int(word[2:]) for word in parts[1].split(", ")]
        if len(values) < 2:
            raise ValueError(f"missing coordinate: {line!r}")
        return cls(values[0], values[1])


@dataclass
class Machine:
    button_a: XY
    button_b: XY
    prize: XY


@dataclass(frozen=True)
class ButtonPresses:
    button_a: int
    button_b: int

    @classmethod
    def from_machine(cls, machine: Machine) -> ButtonPresses:
        """Solve the two linear equations; raise ValueError if not whole."""
        a, b, p = machine.button_a, machine.button_b, machine.prize
        dividend = a.x * p.y - a.y * p.x
        divisor = a.x * b.y - a.y * b.x
        if dividend % divisor != 0:
            raise ValueError("First part not whole number")
        button_b = dividend // divisor
        dividend = p.x - button_b * b.x
        if dividend % a.x != 0:
            raise ValueError("Second part not whole number")
        return cls(dividend // a.x, button_b)

    def total_button_presses(self) -> int:
        """Tokens spent: three per A press, one per B press."""
        return self.button_a * 3 + self.button_b


@dataclass
class Arcade:
    machines: list[Machine] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Arcade:
        """Read machines from blocks of three lines separated by blank lines."""
        lines = text.splitlines()
        machines = []
        for chunk in (lines[i:i + 4] for i in range(0, len(lines), 4)):
            if len(chunk) < 3:
                raise ValueError("incomplete machine description")
            machines.append(
                Machine(XY.parse(chunk[0]), XY.parse(chunk[1]), XY.parse(chunk[2]))
            )
        return cls(machines)

    def adjust_conversion_error(self, conversion_error: int) -> None:
        for machine in self.machines:
            machine.prize.x += conversion_error
            machine.prize.y += conversion_error

    def press_buttons(self) -> list[ButtonPresses | None]:
        """The presses for each machine, or None where no whole solution exists."""
        result: list[ButtonPresses | None] = []
        for machine in self.machines:
            try:
                result.append(ButtonPresses.from_machine(machine))
            except ValueError:
                result.append(None)
        return result


def _total(arcade: Arcade) -> int:
    return sum(
        presses.total_button_presses()
        for presses in arcade.press_buttons()
        if presses is not None
    )


def part_1(text: str) -> int:
    return _total(Arcade.parse(text))


def part_2(text: str) -> int:
    arcade = Arcade.parse(text)
    arcade.adjust_conversion_error(UNIT_CONVERSION_ERROR)
    return _total(arcade)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2024, 13)).read_text().strip()
    print(f"Part 1: {part_1(text)}")
    print(f"Part 2: {part_2(text)}")