"""Utility functions for frame conversion and display geometry.

AIDEV-NOTE: Glue between capture devices (OpenCV/Pillow frames), the
numpy color grids the stylizer works on, and the display surface.
"""

import numpy as np
from PIL import Image

from models import empty_grid


def image_to_grid(image: Image.Image) -> np.ndarray:
    """Convert a PIL image to an (height, width, 3) uint8 color grid.

    Alpha is dropped; grayscale and palette images are expanded to RGB.
    """
    if image.width == 0 or image.height == 0:
        return empty_grid()
    return np.asarray(image.convert("RGB"), dtype=np.uint8)


def bgr_to_grid(frame: "np.ndarray | None") -> np.ndarray:
    """Convert an OpenCV BGR(A) frame to an RGB color grid.

    Returns:
        RGB grid, or an empty grid when no frame is available
    """
    if frame is None or frame.ndim != 3 or frame.shape[0] == 0 or frame.shape[1] == 0:
        return empty_grid()
    # Channel flip without copying through cv2
    return np.ascontiguousarray(frame[:, :, 2::-1])


def downscale_grid(grid: np.ndarray, max_width: int) -> np.ndarray:
    """Shrink a grid to at most ``max_width`` columns, keeping aspect ratio.

    AIDEV-NOTE: The Voronoi mode is O(seeds^2) in pure Python, so its
    input is reduced before sampling. Grids are never upscaled.
    """
    height, width = grid.shape[:2]
    if max_width <= 0 or width <= max_width or height == 0:
        return grid

    scale = max_width / width
    new_height = max(1, int(height * scale))

    image = Image.fromarray(np.asarray(grid[:, :, :3], dtype=np.uint8))
    resized = image.resize((max_width, new_height), Image.Resampling.BILINEAR)
    return np.asarray(resized, dtype=np.uint8)


def brightness(color) -> float:
    """Perceived brightness (0-1) of an RGB color (ITU-R 601 luma)."""
    r, g, b = color[:3]
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255.0


def to_rgb_ints(color) -> "tuple[int, int, int]":
    """Round a float RGB color to clamped 0-255 integers for drawing."""
    return tuple(max(0, min(255, int(round(c)))) for c in color[:3])


def fit_rect(
    src_width: float,
    src_height: float,
    dst_width: float,
    dst_height: float,
) -> "tuple[float, float, float, float]":
    """Source rectangle that fills the destination without distortion.

    Crops the source symmetrically on the axis where its aspect ratio
    exceeds the destination's.

    Returns:
        Tuple of (sx, sy, sw, sh) in source coordinates
    """
    if src_width <= 0 or src_height <= 0 or dst_width <= 0 or dst_height <= 0:
        return 0.0, 0.0, float(max(src_width, 0)), float(max(src_height, 0))

    source_aspect = src_width / src_height
    target_aspect = dst_width / dst_height

    sx, sy, sw, sh = 0.0, 0.0, float(src_width), float(src_height)
    if source_aspect > target_aspect:
        sw = src_height * target_aspect
        sx = (src_width - sw) / 2
    else:
        sh = src_width / target_aspect
        sy = (src_height - sh) / 2

    return sx, sy, sw, sh
