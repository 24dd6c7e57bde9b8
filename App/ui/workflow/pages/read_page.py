"""Knitting page: read-only grid with the row instruction panel."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QVBoxLayout,
    QWidget,
)

from models import AppConfig
from ui.grid_canvas import GridCanvas
from ui.instruction_panel import InstructionPanel
from ui.widgets import WidgetFactory


class ReadPage(QWidget):
    """Page for working the pattern one row at a time."""

    # Navigation signals
    go_to_edit = pyqtSignal()

    def __init__(self, app_config: AppConfig, parent: QWidget | None = None):
        super().__init__(parent)
        self.app_config = app_config

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Initialize the page UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        content = QHBoxLayout()
        self.canvas = GridCanvas(self.app_config.cell_size, editable=False)
        content.addWidget(self.canvas, stretch=1)

        self.instruction_panel = InstructionPanel()
        self.instruction_panel.setMinimumWidth(320)
        self.instruction_panel.setMaximumWidth(420)
        content.addWidget(self.instruction_panel)
        layout.addLayout(content, stretch=1)

        # Navigation buttons
        nav_layout = QHBoxLayout()
        self.back_btn = WidgetFactory.create_nav_button("< Back to Design")
        self.back_btn.clicked.connect(self.go_to_edit.emit)
        nav_layout.addWidget(self.back_btn)
        nav_layout.addStretch()
        layout.addLayout(nav_layout)

    def get_canvas(self) -> GridCanvas:
        return self.canvas

    def get_instruction_panel(self) -> InstructionPanel:
        return self.instruction_panel
