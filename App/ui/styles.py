"""Centralized styling constants for the camera stylizer UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor, QFont

from models import CameraState


class StatusColors:
    """Camera status indicator colors."""

    RUNNING = "green"
    OPENING = "orange"
    PAUSED = "orange"
    ERROR = "red"
    STOPPED = "gray"


class ThemeColors:
    """Application theme colors."""

    # Letterbox behind the stylized frame
    BACKGROUND = QColor(0, 0, 0)

    # Highlight for the active mode button
    MODE_ACTIVE = "#3a6ea5"


class Fonts:
    """Standard application fonts."""

    STATUS_INDICATOR = QFont("Arial", 16)


class Sizes:
    """Standard widget sizes and constraints."""

    CANVAS_MIN_SIZE = (480, 360)
    WINDOW_MIN_SIZE = (640, 520)

    # Buttons and controls
    BUTTON_MIN_WIDTH = 90


# Convenience aliases
COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def status_stylesheet(state: CameraState) -> str:
    """Generate status indicator stylesheet for a camera state.

    Args:
        state: Current CameraState

    Returns:
        CSS stylesheet string with appropriate color
    """
    color = getattr(StatusColors, state.name, StatusColors.STOPPED)
    return f"color: {color};"


def mode_button_stylesheet(active: bool) -> str:
    """Stylesheet for a mode button, highlighted when active."""
    if not active:
        return ""
    return f"background-color: {ThemeColors.MODE_ACTIVE}; color: white;"
