"""Design page: palette, reference image and the paintable grid."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from models import AppConfig
from ui.grid_canvas import GridCanvas
from ui.image_panel import ImagePanel
from ui.palette_panel import PalettePanel
from ui.widgets import WidgetFactory


class EditPage(QWidget):
    """Page combining the editing panels with the grid canvas."""

    # Navigation signals
    go_to_read = pyqtSignal()
    go_to_projects = pyqtSignal()

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

        # Left column: tools in a scroll area so small screens still fit
        tools = QWidget()
        tools_layout = QVBoxLayout(tools)
        tools_layout.setContentsMargins(0, 0, 0, 0)
        self.palette_panel = PalettePanel()
        tools_layout.addWidget(self.palette_panel)
        self.image_panel = ImagePanel(self.app_config.image_opacity)
        tools_layout.addWidget(self.image_panel)
        tools_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidget(tools)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(360)
        scroll.setMaximumWidth(420)
        content.addWidget(scroll)

        self.canvas = GridCanvas(self.app_config.cell_size, editable=True)
        content.addWidget(self.canvas, stretch=1)

        layout.addLayout(content, stretch=1)

        # Navigation buttons
        nav_layout = QHBoxLayout()
        nav_layout.setSpacing(10)

        self.projects_btn = WidgetFactory.create_nav_button("Projects", "Save or open patterns")
        self.projects_btn.clicked.connect(self.go_to_projects.emit)
        nav_layout.addWidget(self.projects_btn)

        nav_layout.addStretch()

        self.read_btn = WidgetFactory.create_nav_button(
            "Start Knitting >", "Read the pattern row by row"
        )
        self.read_btn.clicked.connect(self.go_to_read.emit)
        nav_layout.addWidget(self.read_btn)

        layout.addLayout(nav_layout)

        # Overlay follows the image panel
        self.image_panel.image_loaded.connect(self._on_image_loaded)
        self.image_panel.image_cleared.connect(lambda: self.canvas.set_reference(None))
        self.image_panel.opacity_changed.connect(self.canvas.set_reference_opacity)
        self.image_panel.placement_changed.connect(self.canvas.set_placement)

    def _on_image_loaded(self, pixmap) -> None:
        opacity = self.image_panel.opacity_slider.value() / 100.0
        self.canvas.set_reference(pixmap, opacity)
        self.canvas.set_placement(self.image_panel.placement())

    def get_canvas(self) -> GridCanvas:
        return self.canvas

    def get_palette_panel(self) -> PalettePanel:
        return self.palette_panel

    def get_image_panel(self) -> ImagePanel:
        return self.image_panel
