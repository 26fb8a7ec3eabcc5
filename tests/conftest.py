"""Shared pytest fixtures for the stylizer test suite."""

import numpy as np
import pytest

from models import Seed


def uniform_grid(height, width, color=(100, 150, 200)):
    """Grid of a single color."""
    grid = np.empty((height, width, 3), dtype=np.uint8)
    grid[:, :] = color
    return grid


def checkerboard_grid(height, width, cell=1, dark=(0, 0, 0), light=(255, 255, 255)):
    """Alternating colors every ``cell`` pixels in both axes."""
    ys, xs = np.indices((height, width))
    mask = ((ys // cell) + (xs // cell)) % 2 == 0
    grid = np.empty((height, width, 3), dtype=np.uint8)
    grid[mask] = dark
    grid[~mask] = light
    return grid


def make_seed(x, y, color=(0, 0, 0)):
    return Seed(x, y, *color)


@pytest.fixture
def random_grid():
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(48, 64, 3), dtype=np.uint8)


@pytest.fixture
def scattered_seeds():
    """Deterministic, well-separated seeds over a 100x80 frame."""
    rng = np.random.default_rng(7)
    points = rng.uniform([1, 1], [99, 79], size=(25, 2))
    return [make_seed(float(x), float(y), (i * 10 % 256, 50, 200)) for i, (x, y) in enumerate(points)]
