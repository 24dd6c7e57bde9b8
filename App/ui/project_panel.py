"""Saved projects browser."""

import base64
import time
from typing import Optional, Sequence

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtGui import QIcon, QPixmap
from PyQt6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from models import Project
from project_store import THUMBNAIL_SIZE

DATA_URL_PREFIX = "data:image/png;base64,"


class ProjectPanel(QGroupBox):
    """List of saved projects with save, open, rename, favourite and delete."""

    save_requested = pyqtSignal(str)  # project name
    overwrite_requested = pyqtSignal(str)  # project id
    open_requested = pyqtSignal(str)  # project id
    rename_requested = pyqtSignal(str, str)  # project id, new name
    favorite_toggled = pyqtSignal(str)  # project id
    delete_requested = pyqtSignal(str)  # project id

    def __init__(self, parent: QWidget | None = None):
        super().__init__("Projects", parent)
        self._projects: "dict[str, Project]" = {}
        self._setup_ui()
        self._update_buttons()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.project_list = QListWidget()
        self.project_list.setIconSize(QSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE))
        self.project_list.setSpacing(4)
        layout.addWidget(self.project_list, stretch=1)

        self.empty_label = QLabel("No saved projects yet")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet("color: #888;")
        layout.addWidget(self.empty_label)

        row1 = QHBoxLayout()
        self.save_btn = QPushButton("💾 Save As New...")
        self.save_btn.setToolTip("Save the current pattern as a new project")
        row1.addWidget(self.save_btn)

        self.overwrite_btn = QPushButton("Overwrite Selected")
        self.overwrite_btn.setToolTip("Replace the selected project with the current pattern")
        row1.addWidget(self.overwrite_btn)

        self.open_btn = QPushButton("📂 Open")
        self.open_btn.setToolTip("Replace the current pattern with the selected project")
        row1.addWidget(self.open_btn)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self.favorite_btn = QPushButton("★ Favourite")
        row2.addWidget(self.favorite_btn)

        self.rename_btn = QPushButton("Rename...")
        row2.addWidget(self.rename_btn)

        self.delete_btn = QPushButton("🗑 Delete")
        row2.addWidget(self.delete_btn)
        layout.addLayout(row2)

        self.setLayout(layout)

        self.save_btn.clicked.connect(self._on_save_clicked)
        self.overwrite_btn.clicked.connect(self._emit_for_selected(self.overwrite_requested))
        self.open_btn.clicked.connect(self._emit_for_selected(self.open_requested))
        self.favorite_btn.clicked.connect(self._emit_for_selected(self.favorite_toggled))
        self.rename_btn.clicked.connect(self._on_rename_clicked)
        self.delete_btn.clicked.connect(self._on_delete_clicked)
        self.project_list.itemDoubleClicked.connect(
            lambda item: self.open_requested.emit(item.data(Qt.ItemDataRole.UserRole))
        )
        self.project_list.currentItemChanged.connect(lambda *_: self._update_buttons())

    def set_projects(self, projects: Sequence[Project]):
        """Show a project list, keeping the selection when it still exists."""
        selected = self.selected_project_id()
        self._projects = {p.id: p for p in projects}

        self.project_list.clear()
        for project in projects:
            star = "★ " if project.is_favorite else ""
            updated = time.strftime("%Y-%m-%d %H:%M", time.localtime(project.updated_at))
            item = QListWidgetItem(
                f"{star}{project.name}\n{project.size.row}×{project.size.col}, "
                f"{len(project.palette)} colours, {updated}"
            )
            icon = _thumbnail_icon(project.thumbnail)
            if icon is not None:
                item.setIcon(icon)
            item.setData(Qt.ItemDataRole.UserRole, project.id)
            self.project_list.addItem(item)
            if project.id == selected:
                self.project_list.setCurrentItem(item)

        self.empty_label.setVisible(not projects)
        self._update_buttons()

    def selected_project_id(self) -> Optional[str]:
        item = self.project_list.currentItem()
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    # === Event Handlers ===

    def _emit_for_selected(self, signal):
        def handler():
            project_id = self.selected_project_id()
            if project_id:
                signal.emit(project_id)

        return handler

    def _on_save_clicked(self):
        name, ok = QInputDialog.getText(self, "Save Project", "Project name:")
        if ok:
            self.save_requested.emit(name)

    def _on_rename_clicked(self):
        project_id = self.selected_project_id()
        if not project_id:
            return
        name, ok = QInputDialog.getText(
            self, "Rename Project", "New name:", text=self._projects[project_id].name
        )
        if ok and name.strip():
            self.rename_requested.emit(project_id, name)

    def _on_delete_clicked(self):
        project_id = self.selected_project_id()
        if not project_id:
            return
        reply = QMessageBox.question(
            self,
            "Delete Project",
            f"Delete '{self._projects[project_id].name}'? This cannot be undone.",
        )
        if reply == QMessageBox.StandardButton.Yes:
            self.delete_requested.emit(project_id)

    def _update_buttons(self):
        has_selection = self.selected_project_id() is not None
        for button in (
            self.overwrite_btn,
            self.open_btn,
            self.favorite_btn,
            self.rename_btn,
            self.delete_btn,
        ):
            button.setEnabled(has_selection)


def _thumbnail_icon(thumbnail: Optional[str]) -> Optional[QIcon]:
    if not thumbnail or not thumbnail.startswith(DATA_URL_PREFIX):
        return None
    try:
        data = base64.b64decode(thumbnail[len(DATA_URL_PREFIX):], validate=True)
    except ValueError:
        return None
    pixmap = QPixmap()
    if not pixmap.loadFromData(data, "PNG"):
        return None
    return QIcon(pixmap)
