"""Small widget builders shared by the panels and workflow pages."""

from typing import Optional, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QIcon, QPixmap
from PyQt6.QtWidgets import (
    QDoubleSpinBox,
    QLabel,
    QPushButton,
    QSlider,
    QSpinBox,
)

from ui.styles import SIZES, nav_button_stylesheet


class WidgetFactory:
    """Builders for the controls that recur across the editor."""

    @staticmethod
    def create_double_spinbox(
        range_min: float,
        range_max: float,
        value: float,
        suffix: str = "",
        decimals: int = 1,
        step: float = 1.0,
        tooltip: str = "",
    ) -> QDoubleSpinBox:
        """Create a configured QDoubleSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            suffix: Suffix text (e.g., " cells", "×")
            decimals: Number of decimal places
            step: Single step increment
            tooltip: Tooltip text
        """
        spinbox = QDoubleSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setDecimals(decimals)
        spinbox.setSingleStep(step)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        suffix: str = "",
        tooltip: str = "",
    ) -> QSpinBox:
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_slider_with_label(
        range_min: int,
        range_max: int,
        value: int,
        label_format: str = "{}",
        tick_interval: Optional[int] = None,
        tooltip: str = "",
    ) -> Tuple[QSlider, QLabel]:
        """Horizontal slider plus a label that follows its value.

        Returns:
            Tuple of (slider, label)
        """
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(range_min, range_max)
        slider.setValue(value)
        if tooltip:
            slider.setToolTip(tooltip)
        if tick_interval:
            slider.setTickPosition(QSlider.TickPosition.TicksBelow)
            slider.setTickInterval(tick_interval)

        label = QLabel(label_format.format(value))
        label.setMinimumWidth(40)
        slider.valueChanged.connect(lambda v: label.setText(label_format.format(v)))
        return slider, label

    @staticmethod
    def create_nav_button(text: str, tooltip: str = "") -> QPushButton:
        """Accent-coloured button used to move between workflow pages."""
        button = QPushButton(text)
        button.setMinimumHeight(SIZES.NAV_BUTTON_HEIGHT)
        button.setStyleSheet(nav_button_stylesheet())
        if tooltip:
            button.setToolTip(tooltip)
        return button

    @staticmethod
    def create_color_icon(color: str, size: int = 16) -> QIcon:
        """Solid square icon for a palette colour."""
        pixmap = QPixmap(size, size)
        pixmap.fill(QColor(color))
        return QIcon(pixmap)
