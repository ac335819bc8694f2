from __future__ import annotations

import copy
import random

import pytest

from textrain.rain.columns import Column, advance, column_count, initialize


class FixedRandom(random.Random):
    """random() always returns `value`; every other method is a real draw."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.mark.parametrize(
    "width, expected", [(0, 1), (1, 1), (2, 1), (3, 1), (10, 5), (81, 40)]
)
def test_column_count(width, expected):
    assert column_count(width) == expected


@pytest.mark.parametrize("count, height, length", [(1, 1, 1), (5, 4, 2), (40, 30, 500)])
def test_initialize_bounds(rng, count, height, length):
    cols = initialize(count, height, length, rng)
    assert len(cols) == count
    assert [c.x for c in cols] == [i * 2 for i in range(count)]
    for c in cols:
        assert 5 <= c.height < height + 5
        assert 0 <= c.offset < length


@pytest.mark.parametrize("count, height, length", [(3, 0, 10), (3, -1, 10), (3, 10, 0), (0, 10, 10)])
def test_initialize_degenerate_is_empty(rng, count, height, length):
    assert initialize(count, height, length, rng) == []


def test_offsets_stay_in_range_across_many_advances(rng):
    length = 3
    cols = initialize(20, 10, length, rng)
    for _ in range(250):
        advance(cols, 10, length, rng)
        assert all(0 <= c.offset < length for c in cols)


def test_advance_with_empty_source_is_noop(rng):
    cols = [Column(x=0, height=6, offset=0), Column(x=2, height=9, offset=0)]
    before = copy.deepcopy(cols)
    advance(cols, 10, 0, rng)
    assert cols == before


def test_ten_by_four_scenario(rng):
    cols = initialize(column_count(10), 4, 2, rng)
    assert [c.x for c in cols] == [0, 2, 4, 6, 8]
    initial = [c.offset for c in cols]
    advance(cols, 4, 2, rng)
    assert [c.offset for c in cols] == [(o + 1) % 2 for o in initial]


def test_offset_wraps_to_zero():
    cols = [Column(x=0, height=5, offset=6)]
    advance(cols, 10, 7, FixedRandom(0.99))
    assert cols[0].offset == 0


def test_height_reroll_when_chance_hits():
    rng = FixedRandom(0.0)
    cols = [Column(x=0, height=1000, offset=0) for _ in range(10)]
    advance(cols, 8, 50, rng)
    for c in cols:
        assert 5 <= c.height < 13
        assert c.offset == 1


def test_height_kept_when_chance_misses():
    cols = [Column(x=0, height=7, offset=0)]
    advance(cols, 8, 50, FixedRandom(0.5))
    assert cols[0].height == 7
