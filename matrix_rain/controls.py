"""Runtime key controls: each key tunes the live Settings or ends the run."""
from matrix_rain.colors import ColorScheme
from matrix_rain.config import clamp
from matrix_rain.log import log
from matrix_rain.terminal import (
    KEY_CTRL_C, KEY_CTRL_D, KEY_CTRL_Z, KEY_DOWN, KEY_ENTER, KEY_ESC,
    KEY_LEFT, KEY_RIGHT, KEY_UP,
)

QUIT_KEYS = {"q", " ", KEY_ESC, KEY_ENTER, KEY_CTRL_C, KEY_CTRL_D, KEY_CTRL_Z}

DELAY_STEP = 5
DELAY_MIN, DELAY_MAX = 5, 100
DENSITY_STEP = 0.05
DENSITY_MIN, DENSITY_MAX = 0.05, 1.0
SPAWNS_MIN, SPAWNS_MAX = 1, 20
LENGTH_STEP = 5
LENGTH_MIN, LENGTH_MAX = 5, 50

SCHEME_KEYS = {
    "1": ColorScheme.GREEN,
    "2": ColorScheme.BLUE,
    "3": ColorScheme.RED,
    "4": ColorScheme.PURPLE,
    "5": ColorScheme.CYAN,
    "6": ColorScheme.RAINBOW,
}


def faster(settings):
    settings.frame_delay_ms = clamp(settings.frame_delay_ms - DELAY_STEP, DELAY_MIN, DELAY_MAX)


def slower(settings):
    settings.frame_delay_ms = clamp(settings.frame_delay_ms + DELAY_STEP, DELAY_MIN, DELAY_MAX)


def denser(settings):
    settings.density = clamp(settings.density + DENSITY_STEP, DENSITY_MIN, DENSITY_MAX)
    settings.spawns_per_frame = clamp(settings.spawns_per_frame + 1, SPAWNS_MIN, SPAWNS_MAX)


def sparser(settings):
    settings.density = clamp(settings.density - DENSITY_STEP, DENSITY_MIN, DENSITY_MAX)
    settings.spawns_per_frame = clamp(settings.spawns_per_frame - 1, SPAWNS_MIN, SPAWNS_MAX)


def longer(settings):
    settings.max_length = clamp(settings.max_length + LENGTH_STEP, LENGTH_MIN, LENGTH_MAX)


def shorter(settings):
    settings.max_length = clamp(settings.max_length - LENGTH_STEP, LENGTH_MIN, LENGTH_MAX)
    settings.min_length = min(settings.min_length, settings.max_length)


ACTIONS = {
    KEY_UP: faster,
    KEY_DOWN: slower,
    KEY_RIGHT: denser,
    KEY_LEFT: sparser,
    "+": longer,
    "=": longer,
    "-": shorter,
}


def handle_key(settings, key):
    """
    Apply `key` to `settings`.

    Returns True when the key asks to quit. Unknown keys (and None) are ignored.
    """
    if key is None:
        return False
    if key in QUIT_KEYS:
        return True

    if key in SCHEME_KEYS:
        settings.color_scheme = SCHEME_KEYS[key]
    elif key in ACTIONS:
        ACTIONS[key](settings)
    else:
        return False

    log("[dim]key {!r} -> {}[/]", key, settings)
    return False
