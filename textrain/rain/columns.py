# textrain/rain/columns.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List

MIN_HEIGHT = 5
COLUMN_SPACING = 2
REROLL_CHANCE = 0.02


@dataclass
class Column:
    """One vertical strand of rain, reading the source from `offset` down."""

    x: int
    height: int
    offset: int


def column_count(width: int) -> int:
    """One column per two character cells, never fewer than one."""
    return max(1, width // COLUMN_SPACING)


def _random_height(terminal_height: int, rng: random.Random) -> int:
    return rng.randrange(MIN_HEIGHT, terminal_height + MIN_HEIGHT)


def initialize(
    count: int, terminal_height: int, source_length: int, rng: random.Random
) -> List[Column]:
    """
    Build `count` columns spaced one blank cell apart, each with a random
    height in [5, terminal_height + 5) and a random read offset into the source.
    Degenerate geometry or an empty source yields no columns.
    """
    if count <= 0 or terminal_height <= 0 or source_length <= 0:
        return []
    return [
        Column(
            x=i * COLUMN_SPACING,
            height=_random_height(terminal_height, rng),
            offset=rng.randrange(source_length),
        )
        for i in range(count)
    ]


def advance(
    columns: List[Column], terminal_height: int, source_length: int, rng: random.Random
) -> None:
    """Move every column one character along the source, wrapping at the end."""
    if source_length <= 0:
        return
    for col in columns:
        col.offset += 1
        if col.offset >= source_length:
            col.offset = 0
        # height re-roll is independent of the offset wrap
        if rng.random() < REROLL_CHANCE and terminal_height > 0:
            col.height = _random_height(terminal_height, rng)
