"""Space image format: layer checksum and decoding the message."""

from __future__ import annotations

import sys
from pathlib import Path

from aocsolutions.puzzle import get_aoc_filename

WIDTH = 25
HEIGHT = 6
PIXEL_COUNT = WIDTH * HEIGHT

BLACK = "0"
WHITE = "1"
TRANSPARENT = "2"


def _layers(text: str) -> list[str]:
    return [text[i:i + PIXEL_COUNT] for i in range(0, len(text), PIXEL_COUNT)]


def count_items(chunk: str, needle: str) -> int:
    """Count occurrences of the needle character in the chunk."""
    return chunk.count(needle)


def solve_part_1(text: str) -> int:
    """Multiply the ones and twos of the layer with the fewest zeros."""
    layers = _layers(text)
    if not layers:
        raise ValueError("image has no layers")
    zero_layer = min(layers, key=lambda layer: count_items(layer, "0"))
    return count_items(zero_layer, "1") * count_items(zero_layer, "2")


def render_image(text: str) -> str:
    """Stack the layers and draw the visible pixels, one line per row."""
    layers = _layers(text)
    rows = []
    for y in range(HEIGHT):
        row = []
        for x in range(WIDTH):
            index = x + y * WIDTH
            pixel = next(
                (layer[index] for layer in layers if layer[index] != TRANSPARENT),
                None,
            )
            if pixel == BLACK:
                row.append(" ")
            elif pixel == WHITE:
                row.append("█")
            else:
                raise ValueError(f"Not a pixel {pixel!r}")
        rows.append("".join(row))
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    text = Path(get_aoc_filename(argv, 2019, 8)).read_text().strip()
    print(f"Part 1: {solve_part_1(text)}")
    print()
    print(render_image(text))