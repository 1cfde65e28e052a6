"""
Color Model - maps a cell of a drop to its displayed color.

The head of a drop glows, the rest fades toward black. Rainbow rotates its hue
across columns and along the trail instead of using a fixed channel mix.
"""
import math
from enum import Enum

from rich.color import Color

WHITE = Color.parse("bright_white")
BLACK = Color.parse("black")


class ColorScheme(Enum):
    GREEN = "green"
    BLUE = "blue"
    RED = "red"
    PURPLE = "purple"
    CYAN = "cyan"
    RAINBOW = "rainbow"

    @classmethod
    def from_name(cls, name):
        """Case-insensitive lookup; None for unknown names."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


def hsv_to_rgb(h, s, v):
    """HSV (all in 0-1) to an (r, g, b) tuple of 0-255 ints."""
    i = math.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)
    r, g, b = [
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    ][i % 6]
    return int(r * 255.0), int(g * 255.0), int(b * 255.0)


def _intensity(fade):
    return max(0.15, 1.0 - fade * 0.85)


def _green(fade):
    i = _intensity(fade)
    return int(30.0 * (1.0 - fade)), int(255.0 * i), 0


def _blue(fade):
    i = _intensity(fade)
    return 0, int(100.0 * i), int(255.0 * i)


def _red(fade):
    i = _intensity(fade)
    return int(255.0 * i), int(30.0 * (1.0 - fade)), 0


def _purple(fade):
    i = _intensity(fade)
    return int(180.0 * i), 0, int(255.0 * i)


def _cyan(fade):
    i = _intensity(fade)
    return 0, int(255.0 * i), int(255.0 * i)


# scheme -> (head, near-head, body(fade))
_SCHEMES = {
    ColorScheme.GREEN: ((200, 255, 200), (100, 255, 100), _green),
    ColorScheme.BLUE: ((200, 220, 255), (100, 150, 255), _blue),
    ColorScheme.RED: ((255, 220, 200), (255, 100, 100), _red),
    ColorScheme.PURPLE: ((240, 200, 255), (200, 100, 255), _purple),
    ColorScheme.CYAN: ((200, 255, 255), (100, 255, 255), _cyan),
}


def _rainbow(index, length, column):
    if index == 0:
        return WHITE
    fade = index / length
    hue = ((column * 10.0 + index * 15.0) % 360.0) / 360.0
    value = max(0.2, 1.0 - fade * 0.8)
    return Color.from_rgb(*hsv_to_rgb(hue, 1.0, value))


def color_of(scheme, index, length, column):
    """
    Color of cell `index` (0 = head) of a drop of `length` cells in `column`.

    `length` must be at least 1.
    """
    if scheme is ColorScheme.RAINBOW:
        return _rainbow(index, length, column)

    head, glow, body = _SCHEMES[scheme]
    if index == 0:
        return Color.from_rgb(*head)
    if index == 1:
        return Color.from_rgb(*glow)
    return Color.from_rgb(*body(index / length))
