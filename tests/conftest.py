"""
Shared fixtures: a recording fake terminal and a predictable random source.
"""

import pytest

from matrix_rain.log import reset_log_fn


class StubRandom:
    """Random source that always picks the top of a range and never misses a chance roll."""

    def __init__(self, roll=0.0):
        self.roll = roll

    def randint(self, a, b):
        return b

    def random(self):
        return self.roll

    def choice(self, seq):
        return seq[0]


class FakeTerminal:
    """Terminal double that records everything the Field asks of it."""

    def __init__(self, width=80, height=24, keys=None):
        self.dims = (width, height)
        self.keys = list(keys or [])
        self.writes = []
        self.flushes = 0
        self.size_error = None
        self.flush_error = None
        self.entered = False
        self.restored = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.restored = True
        return False

    def size(self):
        if self.size_error is not None:
            raise self.size_error
        return self.dims

    def poll_key(self, timeout):
        return self.keys.pop(0) if self.keys else None

    def write(self, column, row, glyph, color):
        self.writes.append((column, row, glyph, color))

    def flush(self):
        if self.flush_error is not None:
            raise self.flush_error
        self.flushes += 1


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def stub_rng():
    return StubRandom()


@pytest.fixture(autouse=True)
def silent_log():
    reset_log_fn()
    yield
    reset_log_fn()


@pytest.fixture
def make_rng():
    return StubRandom


@pytest.fixture
def make_terminal():
    return FakeTerminal
