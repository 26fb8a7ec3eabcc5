"""Nearest-color quantization of block colors to a fixed palette.

AIDEV-NOTE: Distance is squared Euclidean in RGB. Ties go to the palette
entry that appears first, so palette order is part of the output.
"""

import numpy as np


def _palette_array(palette) -> np.ndarray:
    if len(palette) == 0:
        raise ValueError("Cannot quantize to an empty palette")
    return np.asarray(palette, dtype=np.float64).reshape(-1, 3)


def nearest_indices(colors: np.ndarray, palette) -> np.ndarray:
    """Index of the closest palette entry for every color.

    Args:
        colors: (..., 3) array of RGB colors
        palette: Non-empty sequence of RGB tuples

    Returns:
        Integer array with the leading shape of ``colors``
    """
    entries = _palette_array(palette)
    colors = np.asarray(colors, dtype=np.float64)

    diff = colors[..., np.newaxis, :] - entries
    distances = (diff * diff).sum(axis=-1)

    # argmin keeps the first minimum, matching the stable tie-break
    return distances.argmin(axis=-1)


def quantize(blocks: np.ndarray, palette) -> np.ndarray:
    """Replace every block color by its nearest palette entry.

    Args:
        blocks: (rows, cols, 3) block grid, may be empty
        palette: Non-empty sequence of RGB tuples

    Returns:
        Block grid of the same shape whose entries are palette colors

    Raises:
        ValueError: If the palette is empty
    """
    entries = _palette_array(palette)
    blocks = np.asarray(blocks, dtype=np.float64)

    if blocks.size == 0:
        return blocks.copy()

    return entries[nearest_indices(blocks, entries)]

