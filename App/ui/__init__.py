"""UI components for the camera stylizer.

This package contains the main window and the canvas that paints
stylized frames.
"""

from ui.canvas import QPainterSurface, StylizedCanvas
from ui.main_window import StylizerWindow

__all__ = [
    "StylizerWindow",
    "StylizedCanvas",
    "QPainterSurface",
]
