from matrix_rain.colors import ColorScheme

# --- Defaults ---
FRAME_DELAY_MS = 50        # Lower = faster
DENSITY = 0.4              # Spawn probability per attempt (0-1)
SPAWNS_PER_FRAME = 4       # Max spawn attempts per frame
MIN_LENGTH = 10
MAX_LENGTH = 30
MIN_SPEED = 2              # Ticks per row, higher = slower
MAX_SPEED = 4
COLOR_SCHEME = ColorScheme.GREEN

# --- Bounds ---
FRAME_DELAY_RANGE = (5, 100)
DENSITY_RANGE = (0.01, 1.0)

# --- CLI fallbacks for unparseable values ---
FALLBACK_FRAME_DELAY_MS = 30
FALLBACK_DENSITY_PCT = 15.0
FALLBACK_SPAWNS = 3
FALLBACK_MAX_LENGTH = 25

FALLBACK_SIZE = (80, 24)   # (width, height) when the terminal cannot be queried
KEY_POLL_TIMEOUT = 0.001   # Seconds
BANNER_PAUSE = 1.5         # Seconds


def clamp(value, low, high):
    return max(low, min(high, value))


class Settings:
    """
    Live tunables of a run.

    Owned by the Field and mutated in place by the CLI parser and the key controls.
    """
    def __init__(self, frame_delay_ms=FRAME_DELAY_MS, density=DENSITY,
                 spawns_per_frame=SPAWNS_PER_FRAME, min_length=MIN_LENGTH,
                 max_length=MAX_LENGTH, min_speed=MIN_SPEED, max_speed=MAX_SPEED,
                 color_scheme=COLOR_SCHEME):
        self.frame_delay_ms = frame_delay_ms
        self.density = density
        self.spawns_per_frame = spawns_per_frame
        self.min_length = min_length
        self.max_length = max_length
        self.min_speed = min_speed
        self.max_speed = max_speed
        self.color_scheme = color_scheme

    def clamp(self):
        """Re-establish the invariants after an arbitrary mutation."""
        self.frame_delay_ms = clamp(self.frame_delay_ms, *FRAME_DELAY_RANGE)
        self.density = clamp(self.density, *DENSITY_RANGE)
        self.spawns_per_frame = max(1, self.spawns_per_frame)
        self.max_length = max(1, self.max_length)
        self.min_length = clamp(self.min_length, 1, self.max_length)
        self.max_speed = max(1, self.max_speed)
        self.min_speed = clamp(self.min_speed, 1, self.max_speed)
        return self

    def __repr__(self):
        return (f"Settings(delay={self.frame_delay_ms}ms, density={self.density:.2f}, "
                f"spawns={self.spawns_per_frame}, length={self.min_length}-{self.max_length}, "
                f"speed={self.min_speed}-{self.max_speed}, color={self.color_scheme.value})")
