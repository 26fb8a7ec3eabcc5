"""Adaptive seed placement for the Voronoi mosaic.

AIDEV-NOTE: Quadtree-style subdivision. Each starting tile is split into
quadrants until a sparse sample of its colors is uniform or the tile
reaches the minimum size, so busy areas get more seeds than flat ones.
An explicit stack replaces recursion; pushing quadrants in reverse keeps
the depth-first TL, TR, BL, BR order of the recursive formulation.
"""

import logging

import numpy as np

from models import MIN_SIZE, STARTING_SIZE, VARIANCE_THRESHOLD, Seed

logger = logging.getLogger(__name__)


def clamp(low, value, high):
    """Clamp ``value`` into [low, high], with ``low`` winning on overlap."""
    return max(low, min(high, value))


def region_sample(
    grid: np.ndarray, x: int, y: int, size: int, stride: int = MIN_SIZE
) -> np.ndarray:
    """Sparse color sample of a square region, bounded by the grid edge.

    Returns:
        (n, 3) array of colors read at ``stride`` in both axes
    """
    height, width = grid.shape[:2]
    window = grid[y : min(y + size, height) : stride, x : min(x + size, width) : stride, :3]
    return window.reshape(-1, 3)


def is_uniform(sample: np.ndarray, threshold: float = VARIANCE_THRESHOLD) -> bool:
    """True when no pair of sampled colors is further apart than threshold.

    Every ordered pair is compared, a color with itself included. The
    self pairs always pass and leave the outcome unchanged.
    """
    colors = np.asarray(sample, dtype=np.float64)
    if len(colors) == 0:
        return True

    diff = colors[:, np.newaxis, :] - colors[np.newaxis, :, :]
    distances = (diff * diff).sum(axis=-1)
    return not bool((distances > threshold).any())


def _midpoint_seed(grid: np.ndarray, x: int, y: int, size: int) -> Seed:
    height, width = grid.shape[:2]
    mx = clamp(0, x + size // 2, width - 1)
    my = clamp(0, y + size // 2, height - 1)
    r, g, b = grid[my, mx, :3].tolist()
    return Seed(x=mx, y=my, r=r, g=g, b=b)


def sample(
    grid: np.ndarray,
    starting_size: int = STARTING_SIZE,
    min_size: int = MIN_SIZE,
    threshold: float = VARIANCE_THRESHOLD,
) -> "list[Seed]":
    """Place seeds densely where color varies and sparsely where it is flat.

    Args:
        grid: (height, width, 3) color grid, may be empty
        starting_size: Side of the top-level tiles
        min_size: Smallest region side, also the sampling stride
        threshold: Maximum squared RGB distance within a uniform region

    Returns:
        Seeds in deterministic depth-first order

    Raises:
        ValueError: If min_size is not positive
    """
    if min_size < 1:
        raise ValueError(f"Minimum region size must be positive, got {min_size}")

    grid = np.asarray(grid)
    if grid.ndim != 3 or grid.shape[0] == 0 or grid.shape[1] == 0:
        return []

    height, width = grid.shape[:2]
    seeds: "list[Seed]" = []

    for tile_y in range(0, height, starting_size):
        for tile_x in range(0, width, starting_size):
            stack = [(tile_x, tile_y, starting_size)]

            while stack:
                x, y, size = stack.pop()

                if size <= min_size:
                    seeds.append(_midpoint_seed(grid, x, y, size))
                    continue

                if is_uniform(region_sample(grid, x, y, size, min_size), threshold):
                    seeds.append(_midpoint_seed(grid, x, y, size))
                    continue

                half = size // 2
                stack.extend(
                    [
                        (x + half, y + half, half),
                        (x, y + half, half),
                        (x + half, y, half),
                        (x, y, half),
                    ]
                )

    logger.debug("Sampled %d seeds from %dx%d grid", len(seeds), width, height)
    return seeds
