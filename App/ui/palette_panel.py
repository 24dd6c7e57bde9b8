"""Palette swatches, brush size and colour editing."""

from typing import Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QButtonGroup,
    QColorDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from models import PEN_SIZES
from ui.styles import SIZES, swatch_stylesheet


class PalettePanel(QGroupBox):
    """Panel for picking the brush colour and editing palette entries.

    Left click selects a colour; double click (or "Edit Colour...") opens a
    colour dialog that recolours the entry in place.
    """

    color_selected = pyqtSignal(int)  # palette id
    color_changed = pyqtSignal(int, str)  # palette id, #RRGGBB
    color_added = pyqtSignal()
    pen_size_changed = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None):
        super().__init__("Palette", parent)
        self.palette: Sequence[str] = ()
        self.active_id = 0
        self._swatches: "list[QPushButton]" = []

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.swatch_layout = QGridLayout()
        self.swatch_layout.setSpacing(4)
        layout.addLayout(self.swatch_layout)

        btn_layout = QHBoxLayout()
        self.add_btn = QPushButton("+ Add Colour")
        self.add_btn.setToolTip("Append a new colour and select it")
        self.add_btn.clicked.connect(self.color_added.emit)
        btn_layout.addWidget(self.add_btn)

        self.edit_btn = QPushButton("Edit Colour...")
        self.edit_btn.setToolTip("Change the selected colour everywhere it is used")
        self.edit_btn.clicked.connect(lambda: self._edit_color(self.active_id))
        btn_layout.addWidget(self.edit_btn)
        layout.addLayout(btn_layout)

        # Pen size
        pen_layout = QHBoxLayout()
        pen_layout.addWidget(QLabel("Pen:"))
        self.pen_group = QButtonGroup(self)
        for size in PEN_SIZES:
            radio = QRadioButton(f"{size}×{size}")
            self.pen_group.addButton(radio, size)
            pen_layout.addWidget(radio)
        self.pen_group.idClicked.connect(self.pen_size_changed.emit)
        pen_layout.addStretch()
        layout.addLayout(pen_layout)

        self.setLayout(layout)

    def set_palette(self, palette: Sequence[str], active_id: int):
        """Rebuild the swatches from a palette snapshot."""
        self.palette = palette
        self.active_id = active_id

        for swatch in self._swatches:
            self.swatch_layout.removeWidget(swatch)
            swatch.deleteLater()
        self._swatches = []

        for color_id, color in enumerate(palette):
            swatch = SwatchButton(color_id, color)
            swatch.clicked.connect(lambda _, i=color_id: self._select(i))
            swatch.double_clicked.connect(self._edit_color)
            row, col = divmod(color_id, SIZES.SWATCHES_PER_ROW)
            self.swatch_layout.addWidget(swatch, row, col)
            self._swatches.append(swatch)

        self._update_selection()

    def set_pen_size(self, pen_size: int):
        button = self.pen_group.button(pen_size)
        if button:
            button.setChecked(True)

    def _select(self, color_id: int):
        self.active_id = color_id
        self._update_selection()
        self.color_selected.emit(color_id)

    def _edit_color(self, color_id: int):
        if not 0 <= color_id < len(self.palette):
            return
        color = QColorDialog.getColor(QColor(self.palette[color_id]), self, "Palette Colour")
        if color.isValid():
            self.color_changed.emit(color_id, color.name().upper())

    def _update_selection(self):
        for swatch in self._swatches:
            swatch.set_selected(swatch.color_id == self.active_id)


class SwatchButton(QPushButton):
    """Square button showing one palette colour."""

    double_clicked = pyqtSignal(int)

    def __init__(self, color_id: int, color: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.color_id = color_id
        self.color = color
        self.setFixedSize(SIZES.SWATCH_SIZE, SIZES.SWATCH_SIZE)
        self.setToolTip(f"{color_id}: {color}")
        self.set_selected(False)

    def set_selected(self, selected: bool):
        self.setStyleSheet(swatch_stylesheet(self.color, selected))

    def mouseDoubleClickEvent(self, event):
        self.double_clicked.emit(self.color_id)
