"""Projects page wrapper for ProjectPanel."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QVBoxLayout,
    QWidget,
)

from ui.project_panel import ProjectPanel
from ui.widgets import WidgetFactory


class ProjectsPage(QWidget):
    """Page wrapper for the saved projects panel with navigation."""

    # Navigation signals
    go_to_edit = pyqtSignal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Initialize the page UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        self.project_panel = ProjectPanel()
        layout.addWidget(self.project_panel, stretch=1)

        nav_layout = QHBoxLayout()
        self.back_btn = WidgetFactory.create_nav_button("< Design")
        self.back_btn.clicked.connect(self.go_to_edit.emit)
        nav_layout.addWidget(self.back_btn)
        nav_layout.addStretch()
        layout.addLayout(nav_layout)

        # Opening a project jumps back to the editor
        self.project_panel.open_requested.connect(lambda _: self.go_to_edit.emit())

    def get_project_panel(self) -> ProjectPanel:
        """Get the embedded ProjectPanel for signal connections."""
        return self.project_panel
