"""Shared pytest fixtures."""

import numpy as np
import pytest

from flow_image.color import FlowColorMapper, PixelFormat
from flow_image.colorwheel import ColorWheel
from flow_image.render import FlowRenderer


class FakeSource:
    """Video source double serving a fixed list of frames."""

    def __init__(self, frames, frame_count=None, opens=True):
        self.frames = list(frames)
        self.count = len(self.frames) if frame_count is None else frame_count
        self.opens = opens
        self.opened_path = None
        self.released = False

    def open(self, path):
        self.opened_path = path
        return self.opens

    def frame_count(self):
        return self.count

    def read_frame(self):
        if not self.frames:
            return None
        return self.frames.pop(0)

    def release(self):
        self.released = True


class FakeEstimator:
    """Returns a constant flow and records what it was called with."""

    name = 'Fake'

    def __init__(self, dx=1.0, dy=0.0):
        self.dx = dx
        self.dy = dy
        self.calls = []

    def estimate(self, frame_a, frame_b):
        self.calls.append((frame_a, frame_b))
        flow = np.zeros(frame_a.shape + (2,), dtype=np.float32)
        flow[:, :, 0] = self.dx
        flow[:, :, 1] = self.dy
        return flow


def make_frames(n, height=8, width=10):
    rng = np.random.default_rng(0)
    return [rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8) for _ in range(n)]


@pytest.fixture
def wheel():
    return ColorWheel()


@pytest.fixture
def mapper(wheel):
    return FlowColorMapper(wheel, PixelFormat.RGBA, darken=0.75)


@pytest.fixture
def rgb_mapper(wheel):
    return FlowColorMapper(wheel, PixelFormat.RGB, darken=0.5)


@pytest.fixture
def renderer(mapper):
    return FlowRenderer(mapper)
