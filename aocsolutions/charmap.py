"""Map every character of a text grid to the positions it occupies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A column/row position in a text grid."""

    x: int
    y: int


CharMap = dict[str, set[Position]]


def text_to_char_map(text: str) -> CharMap:
    """Group the positions of the text's characters by character."""
    char_map: CharMap = {}
    for y, line in enumerate(text.splitlines()):
        for x, ch in enumerate(line):
            char_map.setdefault(ch, set()).add(Position(x, y))
    return char_map