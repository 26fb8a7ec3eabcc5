"""Image-to-abstraction pipeline for the camera stylizer.

AIDEV-NOTE: Organized into modular components:
- blocks: Block averaging
- quantization: Nearest palette color
- sampling: Adaptive Voronoi seed placement
- voronoi: Half-plane clipping cell builder
- processor: FrameStylizer orchestrator
- rendering: DrawingSurface protocol and Pillow rasterizer
- svg_export: SVG/raster export
- utils: Frame conversion and display geometry
"""

from .blocks import aggregate
from .processor import FrameStylizer
from .quantization import quantize
from .rendering import render_frame, render_to_image
from .sampling import sample
from .svg_export import frame_to_svg, save_frame
from .voronoi import build

__all__ = [
    "FrameStylizer",
    "aggregate",
    "build",
    "frame_to_svg",
    "quantize",
    "render_frame",
    "render_to_image",
    "sample",
    "save_frame",
]
