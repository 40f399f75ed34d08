"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gravity.data_models import Body  # noqa: E402
from gravity.simulation import Simulation  # noqa: E402
from gravity.vector_utils import Vector2  # noqa: E402


class RecordingSurface:
    """Stand-in drawing surface that records every call in order."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_circle(self, center, radius, fill, stroke):
        self.calls.append(("circle", center, radius, fill, stroke))

    def line(self, start, end, color):
        self.calls.append(("line", start, end, color))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def four_bodies():
    """The built-in scene: A, B, C, D."""
    return [
        Body(300, 300, 50),
        Body(100, 200, 10, Vector2(1.2, -2)),
        Body(290, 100, 14.99, Vector2(4, 0)),
        Body(290, 500, 4, Vector2(4, 1)),
    ]


@pytest.fixture
def sim(four_bodies):
    return Simulation(four_bodies)
