"""Block averaging of a color grid into a coarser grid.

AIDEV-NOTE: Remainder rows/columns at the bottom/right edge are dropped,
never averaged into a partial block.
"""

import numpy as np


def block_shape(height: int, width: int, size: int) -> "tuple[int, int]":
    """Return the (rows, cols) of the block grid for a frame size."""
    return height // size, width // size


def aggregate(grid: np.ndarray, size: int) -> np.ndarray:
    """Average ``size x size`` windows of an RGB grid.

    Args:
        grid: (height, width, 3) color grid, may be empty
        size: Block side length in grid pixels (>= 1)

    Returns:
        (height // size, width // size, 3) float64 array of block averages

    Raises:
        ValueError: If size is not a positive integer
    """
    if size < 1:
        raise ValueError(f"Block size must be positive, got {size}")

    grid = np.asarray(grid)
    if grid.ndim != 3:
        return np.zeros((0, 0, 3), dtype=np.float64)

    height, width = grid.shape[:2]
    rows, cols = block_shape(height, width, size)
    if rows == 0 or cols == 0:
        return np.zeros((rows, cols, 3), dtype=np.float64)

    # Crop the remainder, then fold each block into its own pair of axes
    kept = grid[: rows * size, : cols * size, :3].astype(np.float64)
    windows = kept.reshape(rows, size, cols, size, 3)

    return windows.mean(axis=(1, 3))
