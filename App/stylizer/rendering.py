"""Rendering of stylized frames onto drawing surfaces.

AIDEV-NOTE: The stylizer never touches a concrete display. Anything that
can fill rectangles, circles and polygons implements DrawingSurface:
PillowSurface here, QPainterSurface in ui.canvas, SvgSurface in
svg_export.
"""

from typing import Protocol

from PIL import Image, ImageDraw

from models import StylizedFrame, StylizeMode

from .utils import brightness, to_rgb_ints

BACKGROUND = (0, 0, 0)


class DrawingSurface(Protocol):
    """Minimal fill-only drawing capability."""

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: "tuple[int, int, int]"
    ) -> None: ...

    def fill_circle(
        self, cx: float, cy: float, radius: float, color: "tuple[int, int, int]"
    ) -> None: ...

    def fill_polygon(
        self, points: "list[tuple[float, float]]", color: "tuple[int, int, int]"
    ) -> None: ...


def circle_radius(color, size: float) -> float:
    """Dot radius for the circle style: brighter blocks get bigger dots."""
    return brightness(color) * (size / 2)


def render_squares(frame: StylizedFrame, surface: DrawingSurface) -> None:
    """One flat rectangle per block."""
    size = frame.block_size
    rows, cols = frame.blocks.shape[:2]

    for by in range(rows):
        for bx in range(cols):
            color = to_rgb_ints(frame.blocks[by, bx])
            surface.fill_rect(bx * size, by * size, size, size, color)


def render_circles(frame: StylizedFrame, surface: DrawingSurface) -> None:
    """Black background with one brightness-sized dot centred in each block."""
    size = frame.block_size
    rows, cols = frame.blocks.shape[:2]

    surface.fill_rect(0, 0, cols * size, rows * size, BACKGROUND)

    for by in range(rows):
        for bx in range(cols):
            block = frame.blocks[by, bx]
            surface.fill_circle(
                bx * size + size / 2,
                by * size + size / 2,
                circle_radius(block, size),
                to_rgb_ints(block),
            )


def render_cells(frame: StylizedFrame, surface: DrawingSurface) -> None:
    """One flat polygon per cell in the seed's color; empty cells skipped."""
    for cell in frame.cells:
        if cell.is_empty:
            continue
        surface.fill_polygon(cell.points, to_rgb_ints(cell.seed.color))


def render_frame(frame: StylizedFrame, surface: DrawingSurface) -> None:
    """Draw a stylized frame with the renderer matching its mode."""
    if frame.is_empty:
        return

    if frame.mode == StylizeMode.SQUARE:
        render_squares(frame, surface)
    elif frame.mode == StylizeMode.CIRCLE:
        render_circles(frame, surface)
    elif frame.mode == StylizeMode.VORONOI:
        render_cells(frame, surface)
    else:
        raise NotImplementedError(f"No renderer for mode {frame.mode}.")


class PillowSurface:
    """DrawingSurface backed by a PIL RGB image."""

    def __init__(self, width: int, height: int, background=BACKGROUND):
        self.image = Image.new("RGB", (max(width, 1), max(height, 1)), background)
        self._draw = ImageDraw.Draw(self.image)

    def fill_rect(self, x, y, w, h, color):
        # PIL rectangles include the far edge, so stop one pixel short
        if w <= 0 or h <= 0:
            return
        self._draw.rectangle([(x, y), (x + w - 1, y + h - 1)], fill=color)

    def fill_circle(self, cx, cy, radius, color):
        if radius <= 0:
            return
        self._draw.ellipse(
            [(cx - radius, cy - radius), (cx + radius, cy + radius)], fill=color
        )

    def fill_polygon(self, points, color):
        if len(points) < 3:
            return
        self._draw.polygon([(float(x), float(y)) for x, y in points], fill=color)


def render_to_image(frame: StylizedFrame) -> Image.Image:
    """Rasterize a stylized frame into a new PIL image."""
    surface = PillowSurface(frame.width, frame.height)
    render_frame(frame, surface)
    return surface.image
