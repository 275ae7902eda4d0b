"""Step ordering: topological order and parallel completion time."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

_STEP_RE = re.compile(r"Step ([A-Z]) must be finished before step ([A-Z]) can begin.*")


def line_to_dep(line: str) -> tuple[str, str]:
    """Return (prerequisite, dependent) from one instruction line."""
    match = _STEP_RE.search(line)
    if match is None:
        raise ValueError(f"not a step instruction: {line!r}")
    return match.group(1), match.group(2)


def processing_time(letter: str, time_offset: int) -> int:
    """Seconds needed to complete the step named by the letter."""
    return ord(letter) - ord("A") + time_offset + 1


def _build_deps(text: str) -> dict[str, set[str]]:
    deps: dict[str, set[str]] = {}
    for before, after in map(line_to_dep, text.splitlines()):
        deps.setdefault(after, set()).add(before)
        deps.setdefault(before, set())
    return deps


def _finish(deps: dict[str, set[str]], letter: str) -> None:
    deps.pop(letter, None)
    for waiting in deps.values():
        waiting.discard(letter)


def solve_part_1(text: str) -> str:
    """Order the steps, always taking the alphabetically first ready step."""
    deps = _build_deps(text)
    answer = []
    while deps:
        ready = [k for k, v in deps.items() if not v]
        if not ready:
            raise ValueError("circular step dependencies")
        letter = min(ready)
        _finish(deps, letter)
        answer.append(letter)
    return "".join(answer)


def solve_part_2(text: str, time_offset: int, num_robots: int) -> int:
    """Return the seconds needed to finish all steps with the given workers."""
    deps = _build_deps(text)
    now = 0
    robots: list[tuple[str, int]] = []

    while deps:
        for letter, _ in sorted(r for r in robots if r[1] <= now):
            _finish(deps, letter)
        robots = [r for r in robots if r[1] > now]

        while len(robots) < num_robots:
            busy = {letter for letter, _ in robots}
            ready = [k for k, v in deps.items() if k not in busy and not v]
            if not ready:
                break
            letter = min(ready)
            robots.append((letter, now + processing_time(letter, time_offset)))

        now += 1

    return now - 1


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2018, 7)).read_text().strip()
    print(f"Part 1: {solve_part_1(text)}")
    print(f"Part 2: {solve_part_2(text, 60, 5)}")