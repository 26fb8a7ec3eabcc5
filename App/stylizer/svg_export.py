"""SVG and raster export of stylized frames."""

import logging
from itertools import chain
from pathlib import Path

import svg

from models import StylizedFrame

from .rendering import render_frame, render_to_image

logger = logging.getLogger(__name__)

RASTER_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".webp"}


def _rgb(color) -> str:
    r, g, b = color
    return f"rgb({r},{g},{b})"


class SvgSurface:
    """DrawingSurface that collects svg.py elements."""

    def __init__(self):
        self.elements: list[svg.Element] = []

    def fill_rect(self, x, y, w, h, color):
        self.elements.append(svg.Rect(x=x, y=y, width=w, height=h, fill=_rgb(color)))

    def fill_circle(self, cx, cy, radius, color):
        if radius <= 0:
            return
        self.elements.append(svg.Circle(cx=cx, cy=cy, r=radius, fill=_rgb(color)))

    def fill_polygon(self, points, color):
        if len(points) < 3:
            return
        # Flatten points for svg.Polygon
        flat: list[float] = [float(v) for v in chain.from_iterable(points)]
        self.elements.append(
            svg.Polygon(
                points=flat,  # type: ignore[arg-type]
                fill=_rgb(color),
                # Hairline stroke hides anti-aliasing seams between cells
                stroke=_rgb(color),
                stroke_width=0.5,
            )
        )


def frame_to_svg(frame: StylizedFrame) -> str:
    """Convert a stylized frame to an SVG document string."""
    width = max(frame.width, 1)
    height = max(frame.height, 1)

    surface = SvgSurface()
    render_frame(frame, surface)

    document = svg.SVG(
        width=width,
        height=height,
        viewBox=svg.ViewBoxSpec(0, 0, width, height),
        elements=surface.elements,
    )
    return document.as_str()


def save_frame(frame: StylizedFrame, path: str | Path) -> Path:
    """Write a stylized frame to disk, format chosen by file suffix.

    Args:
        frame: Frame to export
        path: Destination (.svg or a raster suffix such as .png)

    Returns:
        The path written

    Raises:
        ValueError: If the suffix is not a supported format
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".svg":
        path.write_text(frame_to_svg(frame), encoding="utf-8")
    elif suffix in RASTER_SUFFIXES:
        render_to_image(frame).save(path)
    else:
        raise ValueError(f"Unsupported export format: {path.suffix or '(none)'}")

    logger.info("Saved %s frame to %s", frame.mode.value, path)
    return path
