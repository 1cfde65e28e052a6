"""
Terminal Driver - raw keyboard input and cell-addressed color output.

Input is read straight from the tty in raw mode (select + os.read); output is
queued per frame and written through a rich Console in one batch.
"""
import os
import select
import sys
import termios
import tty

from rich.console import Console
from rich.control import Control
from rich.style import Style
from rich.text import Text

# --- Key names ---
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_ESC = "esc"
KEY_ENTER = "enter"
KEY_CTRL_C = "ctrl+c"
KEY_CTRL_D = "ctrl+d"
KEY_CTRL_Z = "ctrl+z"

_CONTROL_BYTES = {
    b"\r": KEY_ENTER,
    b"\n": KEY_ENTER,
    b"\x03": KEY_CTRL_C,
    b"\x04": KEY_CTRL_D,
    b"\x1a": KEY_CTRL_Z,
}

_ARROWS = {
    b"A": KEY_UP,
    b"B": KEY_DOWN,
    b"C": KEY_RIGHT,
    b"D": KEY_LEFT,
}

ESCAPE_TIMEOUT = 0.01  # Seconds to wait for the rest of an escape sequence

DISABLE_LINE_WRAP = "\x1b[?7l"
ENABLE_LINE_WRAP = "\x1b[?7h"
RESET_COLOR = "\x1b[0m"


class InputHandler:
    """Non-blocking key reader over a raw-mode file descriptor."""

    def __init__(self, fd):
        self.fd = fd

    def _ready(self, timeout):
        readable, _, _ = select.select([self.fd], [], [], timeout)
        return bool(readable)

    def _read(self):
        return os.read(self.fd, 1)

    def get_key(self, timeout=0):
        """
        Wait at most `timeout` seconds for a key.

        Returns a key name (KEY_*), a single printable character, or None.
        """
        if not self._ready(timeout):
            return None

        data = self._read()
        if not data:
            return None

        if data == b"\x1b":
            return self._read_escape()
        if data in _CONTROL_BYTES:
            return _CONTROL_BYTES[data]
        if data[0] >= 0x80:
            return self._read_utf8(data)
        return data.decode("ascii")

    def _read_escape(self):
        # A lone ESC is the Esc key; ESC O X and CSI sequences ending in A-D are cursor keys.
        if not self._ready(ESCAPE_TIMEOUT):
            return KEY_ESC
        intro = self._read()
        if intro == b"O":
            if not self._ready(ESCAPE_TIMEOUT):
                return KEY_ESC
            return _ARROWS.get(self._read())
        if intro != b"[":
            return KEY_ESC

        # CSI: parameter and intermediate bytes (0x20-0x3F), then one final byte (0x40-0x7E).
        # Modifiers are dropped, so Shift+Up is still Up; other sequences are ignored whole.
        while self._ready(ESCAPE_TIMEOUT):
            byte = self._read()
            if not byte:
                return None
            if 0x40 <= byte[0] <= 0x7E:
                return _ARROWS.get(byte)
            if not 0x20 <= byte[0] <= 0x3F:
                return None
        return None

    def _read_utf8(self, lead):
        if lead[0] >= 0xF0:
            extra = 3
        elif lead[0] >= 0xE0:
            extra = 2
        else:
            extra = 1
        data = lead
        for _ in range(extra):
            if not self._ready(ESCAPE_TIMEOUT):
                break
            data += self._read()
        return data.decode("utf-8", errors="replace")


class Terminal:
    """
    Raw-mode terminal session.

    Use as a context manager: entering switches the tty to raw mode, hides the
    cursor, disables line wrap and clears the screen; leaving undoes all of it,
    also when the body raised.
    """

    def __init__(self, console=None, stdin=None):
        self.console = console or Console(highlight=False)
        self.stdin = stdin or sys.stdin
        self.fd = self.stdin.fileno()
        self.input = InputHandler(self.fd)
        self._old_settings = None
        self._pending = []

    # --- Session ---
    def __enter__(self):
        try:
            self._old_settings = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
        except termios.error as e:
            raise OSError(*e.args) from e
        try:
            self.console.show_cursor(False)
            self.console.file.write(DISABLE_LINE_WRAP)
            self.console.clear()
            self.console.file.flush()
        except BaseException:
            self.restore()
            raise
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.restore()
        return False

    def restore(self):
        """Put the terminal back the way we found it."""
        self._pending.clear()
        try:
            self.console.file.write(RESET_COLOR)
            self.console.show_cursor(True)
            self.console.file.write(ENABLE_LINE_WRAP)
            self.console.clear()
            self.console.file.flush()
        finally:
            if self._old_settings is not None:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self._old_settings)
                self._old_settings = None

    # --- Capabilities used by the Field ---
    def size(self):
        """(width, height) of the terminal; raises OSError if it cannot be queried."""
        size = os.get_terminal_size(self.console.file.fileno())
        return size.columns, size.lines

    def poll_key(self, timeout):
        return self.input.get_key(timeout)

    def write(self, column, row, glyph, color):
        self._pending.append((column, row, glyph, color))

    def flush(self):
        """Write every queued cell as a single batch."""
        pending, self._pending = self._pending, []
        with self.console:
            for column, row, glyph, color in pending:
                self.console.control(Control.move_to(column, row))
                self.console.print(Text(glyph, style=Style(color=color)), end="", soft_wrap=True)
        self.console.file.flush()
