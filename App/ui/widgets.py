"""Widget factory for creating common UI patterns with reduced boilerplate.

This module provides factory functions to eliminate repetitive widget creation
code throughout the UI components.
"""

from PyQt6.QtWidgets import QPushButton, QSpinBox

from ui.styles import SIZES


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        suffix: str = "",
        step: int = 1,
        tooltip: str = "",
    ) -> QSpinBox:
        """Create a configured QSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            suffix: Suffix text
            step: Single step increment
            tooltip: Tooltip text

        Returns:
            Configured QSpinBox
        """
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        spinbox.setSingleStep(step)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_button(
        text: str,
        tooltip: str = "",
        checkable: bool = False,
    ) -> QPushButton:
        """Create a toolbar-sized push button."""
        button = QPushButton(text)
        button.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        button.setCheckable(checkable)
        if tooltip:
            button.setToolTip(tooltip)
        return button
