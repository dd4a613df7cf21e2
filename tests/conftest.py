"""
Shared fixtures: a canvas that records draw calls and a seeded random source.
"""
import random

import pytest


class RecordingCanvas:
    """Canvas that remembers every draw call instead of drawing."""

    def __init__(self):
        self.calls = []

    def draw(self, image_key, x, y):
        self.calls.append((image_key, x, y))


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def rng():
    return random.Random(1234)
