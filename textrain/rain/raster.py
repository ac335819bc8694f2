# textrain/rain/raster.py
"""
Turn column state into a frame.

`rasterize` places the glyphs on a plain character grid; `render` wraps every
non-blank glyph in a randomly drawn color and returns a Rich `Text` sized to
exactly width x height cells. Neither function mutates its inputs.
"""

from __future__ import annotations

import random
from typing import List, Sequence

from rich.text import Text

from .columns import Column

BLANK = " "

# Greens and a little white, after the classic falling-code look
DEFAULT_PALETTE = (
    "green",
    "bright_green",
    "green3",
    "spring_green2",
    "dark_green",
    "white",
)

Grid = List[List[str]]


def rasterize(
    columns: Sequence[Column], width: int, height: int, characters: Sequence[str]
) -> Grid:
    grid: Grid = [[BLANK] * width for _ in range(height)]
    length = len(characters)
    if length == 0:
        return grid

    for col in columns:
        # Stale geometry after a shrink; the next rebuild drops these.
        if col.x >= width or col.x < 0:
            continue
        for row in range(min(col.height, height)):
            grid[row][col.x] = characters[(col.offset + row) % length]
    return grid


def render(
    grid: Grid, rng: random.Random, palette: Sequence[str] = DEFAULT_PALETTE
) -> Text:
    text = Text(no_wrap=True, overflow="crop", end="")
    for y, row in enumerate(grid):
        if y:
            text.append("\n")
        for ch in row:
            if ch == BLANK or not palette:
                text.append(ch)
            else:
                text.append(ch, style=rng.choice(palette))
    return text


def rasterize_frame(
    columns: Sequence[Column],
    width: int,
    height: int,
    characters: Sequence[str],
    rng: random.Random,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> Text:
    """Convenience wrapper: grid and colors in one call."""
    return render(rasterize(columns, width, height, characters), rng, palette)
