import random
from typing import NamedTuple

from rich.color import Color

from matrix_rain.colors import BLACK, color_of

CHARSET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    "@#$%^&*()_+-=[]{}|;:,.<>?"
    "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
)

START_ROW_RANGE = (-30, -1)   # Drops enter from above the screen
MAX_SHIMMER = 2               # Glyph swaps attempted per move
SHIMMER_CHANCE = 0.5


class Draw(NamedTuple):
    column: int
    row: int
    glyph: str
    color: Color


class Drop:
    """A single falling column of glyphs."""

    def __init__(self, column, settings, rng=None):
        self.rng = rng or random
        self.column = column
        self.length = self.rng.randint(settings.min_length, settings.max_length)
        self.row = self.rng.randint(*START_ROW_RANGE)
        self.speed = self.rng.randint(settings.min_speed, settings.max_speed)
        self.glyphs = [self._random_glyph() for _ in range(self.length)]
        self.tick = 0

    def _random_glyph(self):
        return self.rng.choice(CHARSET)

    def _shimmer(self):
        for _ in range(self.rng.randint(0, MAX_SHIMMER)):
            if self.rng.random() < SHIMMER_CHANCE:
                idx = self.rng.randint(0, self.length - 1)
                self.glyphs[idx] = self._random_glyph()

    def advance(self, height, scheme):
        """
        Run one simulation tick.

        The drop only moves every `speed` ticks; on other ticks nothing changes on screen
        and no draws are returned. On a move, the head steps down one row, a few glyphs
        may shimmer, every visible cell is repainted and the cell just behind the tail
        is blanked.
        """
        self.tick += 1
        if self.tick % self.speed != 0:
            return []

        self.row += 1
        self._shimmer()

        draws = []
        for i, glyph in enumerate(self.glyphs):
            y = self.row - i
            if 0 <= y < height:
                draws.append(Draw(self.column, y, glyph, color_of(scheme, i, self.length, self.column)))

        tail_y = self.row - self.length
        if 0 <= tail_y < height:
            draws.append(Draw(self.column, tail_y, " ", BLACK))

        return draws

    def is_done(self, height):
        # Tail row strictly below the bottom edge, not merely on it.
        return self.row - self.length > height

    def __repr__(self):
        return f"Drop(column={self.column}, row={self.row}, length={self.length}, speed={self.speed})"
