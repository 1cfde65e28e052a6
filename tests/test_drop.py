"""
Tests for a single drop's lifecycle.
"""

import random

import pytest

from matrix_rain.colors import BLACK, WHITE, ColorScheme
from matrix_rain.config import Settings
from matrix_rain.drop import CHARSET, START_ROW_RANGE, Drop


def fixed_settings(length=5, speed=1):
    return Settings(min_length=length, max_length=length, min_speed=speed, max_speed=speed)


class TestCreation:
    """Sampling of length, speed, start row and glyphs."""

    def test_samples_within_settings(self):
        rng = random.Random(7)
        settings = Settings(min_length=3, max_length=9, min_speed=2, max_speed=4)
        for _ in range(200):
            drop = Drop(11, settings, rng)
            assert drop.column == 11
            assert 3 <= drop.length <= 9
            assert 2 <= drop.speed <= 4
            assert START_ROW_RANGE[0] <= drop.row <= START_ROW_RANGE[1]
            assert drop.tick == 0

    def test_glyph_buffer_matches_length(self):
        rng = random.Random(3)
        for _ in range(50):
            drop = Drop(0, Settings(), rng)
            assert len(drop.glyphs) == drop.length
            assert all(g in CHARSET for g in drop.glyphs)

    def test_fresh_drop_is_not_done(self):
        rng = random.Random(1)
        for _ in range(50):
            assert not Drop(0, Settings(), rng).is_done(24)


class TestAdvance:
    """Movement, shimmer and draw instructions."""

    def test_moves_once_every_speed_ticks(self, stub_rng):
        drop = Drop(4, fixed_settings(speed=3), stub_rng)
        start = drop.row
        assert drop.advance(24, ColorScheme.GREEN) == []
        assert drop.advance(24, ColorScheme.GREEN) == []
        drop.advance(24, ColorScheme.GREEN)
        assert drop.row == start + 1

    def test_draws_only_visible_rows(self, stub_rng):
        drop = Drop(4, fixed_settings(length=5), stub_rng)
        assert drop.row == -1
        for _ in range(3):
            draws = drop.advance(24, ColorScheme.GREEN)
        # head at row 2: rows 2, 1, 0 visible, rows -1 and -2 are not
        assert drop.row == 2
        assert sorted(d.row for d in draws) == [0, 1, 2]
        assert all(d.column == 4 for d in draws)

    def test_erases_cell_behind_tail(self, stub_rng):
        drop = Drop(4, fixed_settings(length=5), stub_rng)
        drop.row = 9
        draws = drop.advance(24, ColorScheme.GREEN)
        blank = draws[-1]
        assert (blank.row, blank.glyph, blank.color) == (5, " ", BLACK)
        assert [d.row for d in draws[:-1]] == [10, 9, 8, 7, 6]

    def test_no_draws_below_screen(self, stub_rng):
        drop = Drop(0, fixed_settings(length=5), stub_rng)
        drop.row = 40
        assert drop.advance(24, ColorScheme.GREEN) == []

    def test_head_uses_scheme_color(self, stub_rng):
        drop = Drop(2, fixed_settings(length=5), stub_rng)
        drop.row = 10
        draws = drop.advance(24, ColorScheme.RAINBOW)
        head = next(d for d in draws if d.row == 11)
        assert head.color == WHITE

    def test_shimmer_keeps_buffer_valid(self):
        rng = random.Random(42)
        drop = Drop(0, fixed_settings(length=20), rng)
        before = list(drop.glyphs)
        for _ in range(100):
            drop.advance(1000, ColorScheme.GREEN)
            assert len(drop.glyphs) == 20
            assert all(g in CHARSET for g in drop.glyphs)
        assert drop.glyphs != before

    def test_shimmer_replaces_glyph(self, stub_rng):
        drop = Drop(0, fixed_settings(length=5), stub_rng)
        drop.glyphs = ["x"] * 5
        drop.advance(24, ColorScheme.GREEN)
        # stub: two shimmer rolls, both land on the last index with CHARSET[0]
        assert drop.glyphs == ["x", "x", "x", "x", CHARSET[0]]


class TestIsDone:
    """Retirement once the tail is past the bottom edge."""

    @pytest.mark.parametrize("speed", [1, 2, 4])
    def test_done_after_length_plus_height_rows(self, stub_rng, speed):
        height, length = 24, 5
        drop = Drop(0, fixed_settings(length=length, speed=speed), stub_rng)
        moves = height + length + 1 - drop.row

        for _ in range(moves * speed - 1):
            drop.advance(height, ColorScheme.GREEN)
        assert not drop.is_done(height)

        drop.advance(height, ColorScheme.GREEN)
        assert drop.is_done(height)

    def test_tail_on_bottom_edge_is_not_done(self, stub_rng):
        drop = Drop(0, fixed_settings(length=5), stub_rng)
        drop.row = 24 + 5
        assert not drop.is_done(24)
        drop.row += 1
        assert drop.is_done(24)

