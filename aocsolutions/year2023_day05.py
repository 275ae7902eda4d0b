"""Seed almanac: translating seeds through a chain of range maps."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

I64_MAX = 2**63 - 1

Interval = tuple[int, int]  # half-open [start, end)


@dataclass(frozen=True)
class Translation:
    """Moves values in [source, upper_limit) by delta."""

    source: int
    delta: int
    upper_limit: int

    @classmethod
    def from_ranges(cls, source: int, destination: int, size: int) -> Translation:
        return cls(source, destination - source, source + size)

    def translate(self, seed: int) -> int | None:
        if self.source <= seed < self.upper_limit:
            return seed + self.delta
        return None


@dataclass
class Translations:
    """One map; the first translation covering a value applies."""

    translations: list[Translation] = field(default_factory=list)

    def translate(self, seed: int) -> int:
        for translation in self.translations:
            translated = translation.translate(seed)
            if translated is not None:
                return translated
        return seed

    def translate_intervals(self, intervals: Iterable[Interval]) -> list[Interval]:
        """Map whole half-open intervals, splitting them where needed."""
        result: list[Interval] = []
        pending = [iv for iv in intervals if iv[0] < iv[1]]
        for t in self.translations:
            remaining: list[Interval] = []
            for start, end in pending:
                low, high = max(start, t.source), min(end, t.upper_limit)
                if low < high:
                    result.append((low + t.delta, high + t.delta))
                    if start < low:
                        remaining.append((start, low))
                    if high < end:
                        remaining.append((high, end))
                else:
                    remaining.append((start, end))
            pending = remaining
        return result + pending


@dataclass
class Almanac:
    seeds: list[int] = field(default_factory=list)
    seed_to_soil: Translations = field(default_factory=Translations)
    soil_to_fertilizer: Translations = field(default_factory=Translations)
    fertilizer_to_water: Translations = field(default_factory=Translations)
    water_to_light: Translations = field(default_factory=Translations)
    light_to_temperature: Translations = field(default_factory=Translations)
    temperature_to_humidity: Translations = field(default_factory=Translations)
    humidity_to_location: Translations = field(default_factory=Translations)

    @property
    def maps(self) -> tuple[Translations, ...]:
        return (
            self.seed_to_soil,
            self.soil_to_fertilizer,
            self.fertilizer_to_water,
            self.water_to_light,
            self.light_to_temperature,
            self.temperature_to_humidity,
            self.humidity_to_location,
        )

    def location(self, seed: int) -> int:
        """Follow a seed through every map to its location."""
        for mapping in self.maps:
            seed = mapping.translate(seed)
        return seed


def _int_or_zero(word: str) -> int:
    try:
        return int(word)
    except ValueError:
        return 0


def _line_to_translation(line: str) -> Translation:
    words = line.split() + ["0", "0", "0"]
    destination, source, size = (_int_or_zero(w) for w in words[:3])
    return Translation.from_ranges(source, destination, size)


def parse(text: str) -> Almanac:
    """Read the seeds and the seven maps, in order."""
    almanac = Almanac()
    maps = almanac.maps
    paragraph = 0
    for line in text.splitlines():
        if not line:
            continue
        if line.startswith("seeds: "):
            almanac.seeds = [_int_or_zero(word) for word in line[6:].split()]
        elif "-to-" in line:
            paragraph += 1
        elif paragraph == 0:
            continue
        elif paragraph <= len(maps):
            maps[paragraph - 1].translations.append(_line_to_translation(line))
        else:
            raise ValueError("to many paragraphs")
    return almanac


def solve_part_1(almanac: Almanac) -> int:
    """The lowest location of any listed seed."""
    if not almanac.seeds:
        raise ValueError("No solution")
    return min(almanac.location(seed) for seed in almanac.seeds)


def solve_part_2(almanac: Almanac) -> int:
    """The lowest location when the seeds list (start, length) pairs."""
    seeds = almanac.seeds
    intervals = [(start, start + size) for start, size in zip(seeds[::2], seeds[1::2])]
    for mapping in almanac.maps:
        intervals = mapping.translate_intervals(intervals)
    return min((start for start, end in intervals if start < end), default=I64_MAX)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    almanac = parse(Path(get_aoc_filename(argv, 2023, 5)).read_text())
    print(f"part 1: {solve_part_1(almanac)}")
    print(f"part 2: {solve_part_2(almanac)}")