"""Matrix rain: falling glyph columns with a fading color trail, tunable live from the keyboard."""

__version__ = "1.0.0"

from matrix_rain.colors import ColorScheme, color_of, hsv_to_rgb
from matrix_rain.config import Settings
from matrix_rain.drop import CHARSET, Draw, Drop
from matrix_rain.field import Field
from matrix_rain.controls import handle_key
from matrix_rain.terminal import Terminal

__all__ = [
    "CHARSET",
    "ColorScheme",
    "Draw",
    "Drop",
    "Field",
    "Settings",
    "Terminal",
    "color_of",
    "handle_key",
    "hsv_to_rgb",
]
