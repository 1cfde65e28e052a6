"""
Field - the live set of drops and the per-frame loop that drives them.

Each frame: poll a key, refresh the terminal size, spawn new drops, advance
every drop and paint its cells, keep the survivors, flush, sleep.
"""
import random
import time

from matrix_rain.config import FALLBACK_SIZE, KEY_POLL_TIMEOUT, Settings
from matrix_rain.controls import handle_key
from matrix_rain.drop import Drop
from matrix_rain.log import log


class Field:
    def __init__(self, terminal, settings=None, rng=None, sleep=time.sleep):
        self.terminal = terminal
        self.settings = settings or Settings()
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.drops = []
        self.width, self.height = FALLBACK_SIZE
        self.frames = 0
        self.spawned = 0
        try:
            self.width, self.height = terminal.size()
        except OSError:
            pass  # start from FALLBACK_SIZE

    def refresh_size(self):
        """Re-read the terminal size; keep the last known one if the query fails."""
        try:
            width, height = self.terminal.size()
        except OSError as e:
            log("[yellow]⚠️ Terminal size query failed ({}), keeping {}x{}[/]", e, self.width, self.height)
            return

        if (width, height) != (self.width, self.height):
            log("[dim]Resized: {}x{} -> {}x{}[/]", self.width, self.height, width, height)
        self.width, self.height = width, height

    def spawn(self):
        """Attempt up to `spawns_per_frame` spawns, each succeeding with `density`."""
        if self.width <= 0:
            return 0

        count = 0
        for _ in range(self.rng.randint(1, self.settings.spawns_per_frame)):
            if self.rng.random() < self.settings.density:
                column = self.rng.randint(0, self.width - 1)
                self.drops.append(Drop(column, self.settings, self.rng))
                count += 1
        self.spawned += count
        return count

    def advance(self):
        """Advance every drop, paint its cells and retire the finished ones."""
        drops, self.drops = self.drops, []
        scheme = self.settings.color_scheme
        draws = []

        for drop in drops:
            for draw in drop.advance(self.height, scheme):
                self.terminal.write(*draw)
                draws.append(draw)
            if not drop.is_done(self.height):
                self.drops.append(drop)

        return draws

    def frame(self):
        """Run one frame. Returns False once a quit key was pressed."""
        key = self.terminal.poll_key(KEY_POLL_TIMEOUT)
        if handle_key(self.settings, key):
            return False

        self.refresh_size()
        self.spawn()
        self.advance()
        self.terminal.flush()
        self.frames += 1
        return True

    def run(self):
        """Animate until a quit key; the terminal is restored on every exit path."""
        log("[dim]Starting: {}x{} {}[/]", self.width, self.height, self.settings)
        with self.terminal:
            try:
                while self.frame():
                    self.sleep(self.settings.frame_delay_ms / 1000.0)
            except KeyboardInterrupt:
                pass
        log("[dim]Stopped after {} frames, {} drops spawned[/]", self.frames, self.spawned)
