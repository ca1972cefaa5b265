import os

# headless pygame; must be set before pygame creates any video state
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from circles.scheduler import FrameLoop


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start=0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def loop(clock):
    return FrameLoop(clock=clock)
