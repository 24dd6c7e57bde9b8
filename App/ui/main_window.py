"""Main application window for the pattern designer."""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDockWidget,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QToolBar,
)

from config_manager import ConfigManager
from errors import InvalidImage, PatternError
from models import GridSize
from pattern import PatternSession
from project_store import ProjectStore
from ui.console_panel import ConsolePanel
from ui.settings_dialog import SettingsDialog
from ui.workflow import CentralWorkflowWidget, WorkflowStep


class PatternStudioWindow(QMainWindow):
    """Main window: owns the PatternSession and routes panel signals to it."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        super().__init__()
        self.setWindowTitle("StitchGrid v0.1.0")
        self.setMinimumSize(1100, 800)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.app_config = self.config_manager.load()
        self.store = ProjectStore(self.app_config.data_dir)
        self.session = PatternSession(
            GridSize(row=self.app_config.rows, col=self.app_config.cols),
            self.app_config.palette,
            self.app_config.pen_size,
        )
        self.current_project_id: Optional[str] = None

        # UI component references (created in _setup_ui)
        self.console_panel: ConsolePanel
        self.console_dock: QDockWidget

        self._setup_ui()
        self._connect_signals()
        self._restore_state()
        self._refresh_all()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_menu_bar()
        self._create_toolbar()
        self._create_central_workflow()
        self._create_dock_widgets()
        self.statusBar()

    def _create_menu_bar(self):
        """Create the menu bar with Edit and View menus."""
        menubar = self.menuBar()
        if menubar is None:
            return

        self.edit_menu = menubar.addMenu("&Edit")
        self.view_menu = menubar.addMenu("&View")
        self.view_actions = {}

    def _create_toolbar(self):
        """Create the main toolbar with editing actions and settings."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setObjectName("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        settings_action = QAction("⚙ Settings", self)
        settings_action.setToolTip("Open application settings")
        settings_action.triggered.connect(self._open_settings_dialog)
        toolbar.addAction(settings_action)

        toolbar.addSeparator()

        self.undo_action = QAction("↶ Undo", self)
        self.undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        self.undo_action.triggered.connect(self._undo)
        toolbar.addAction(self.undo_action)

        self.redo_action = QAction("↷ Redo", self)
        self.redo_action.setShortcut(QKeySequence.StandardKey.Redo)
        self.redo_action.triggered.connect(self._redo)
        toolbar.addAction(self.redo_action)

        toolbar.addSeparator()

        self.new_action = QAction("New Grid", self)
        self.new_action.setToolTip("Start a blank grid with the size from Settings")
        self.new_action.triggered.connect(self._new_grid)
        toolbar.addAction(self.new_action)

        self.clear_action = QAction("Clear", self)
        self.clear_action.setToolTip("Fill the whole grid with colour 0")
        self.clear_action.triggered.connect(self._clear_grid)
        toolbar.addAction(self.clear_action)

        self.rotate_action = QAction("↻ Rotate", self)
        self.rotate_action.setToolTip("Rotate the pattern 90° clockwise")
        self.rotate_action.triggered.connect(self._rotate)
        toolbar.addAction(self.rotate_action)

        for action in (
            self.undo_action,
            self.redo_action,
            self.new_action,
            self.clear_action,
            self.rotate_action,
        ):
            self.edit_menu.addAction(action)

        toolbar.addSeparator()

        self.size_label = QLabel("")
        self.size_label.setToolTip("Grid size (rows × columns)")
        toolbar.addWidget(self.size_label)

        toolbar.addSeparator()

        # Panel toggle buttons will be added after dock widgets are created

    def _create_central_workflow(self):
        """Create the central workflow widget."""
        self.central_workflow = CentralWorkflowWidget(self.app_config)
        self.setCentralWidget(self.central_workflow)

        # Get references to embedded panels for convenience
        self.edit_canvas = self.central_workflow.get_edit_canvas()
        self.read_canvas = self.central_workflow.get_read_canvas()
        self.palette_panel = self.central_workflow.get_palette_panel()
        self.image_panel = self.central_workflow.get_image_panel()
        self.instruction_panel = self.central_workflow.get_instruction_panel()
        self.project_panel = self.central_workflow.get_project_panel()

    def _create_dock_widgets(self):
        """Create the Console panel as a dockable widget."""
        self.console_panel = ConsolePanel()
        self.console_dock = QDockWidget("Console", self)
        self.console_dock.setWidget(self.console_panel)
        self.console_dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea
            | Qt.DockWidgetArea.RightDockWidgetArea
            | Qt.DockWidgetArea.BottomDockWidgetArea
        )
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.console_dock)

        self._add_view_menu_actions()
        self._add_toolbar_toggles()

    def _add_view_menu_actions(self):
        """Add the console toggle and step shortcuts to the View menu."""
        action = self.console_dock.toggleViewAction()
        if action:
            action.setText("Show Console")
            self.view_menu.addAction(action)
            self.view_actions["Console"] = action

        self.view_menu.addSeparator()

        for step in WorkflowStep:
            name = f"Go to {step.label}"
            step_action = QAction(name, self)
            step_action.triggered.connect(
                lambda _, s=step: self.central_workflow.set_current_step(s)
            )
            self.view_menu.addAction(step_action)
            self.view_actions[name] = step_action

    def _add_toolbar_toggles(self):
        """Add a toggle button to the toolbar for the console dock."""
        toolbar = self.findChild(QToolBar, "Main Toolbar")
        action = self.console_dock.toggleViewAction()
        if not toolbar or not action:
            return

        btn = QPushButton("💬")
        btn.setToolTip("Toggle Console panel")
        btn.setCheckable(True)
        btn.setChecked(self.console_dock.isVisible())
        btn.setMaximumWidth(35)
        btn.clicked.connect(action.trigger)
        self.console_dock.visibilityChanged.connect(btn.setChecked)
        toolbar.addWidget(btn)

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.central_workflow.step_changed.connect(self._on_workflow_step_changed)

        # Painting
        self.edit_canvas.stroke_started.connect(self._on_stroke_started)
        self.edit_canvas.stroke_moved.connect(self._on_stroke_moved)
        self.edit_canvas.stroke_finished.connect(self._on_stroke_finished)
        self.edit_canvas.cell_hovered.connect(self._on_cell_hovered)
        self.read_canvas.cell_hovered.connect(self._on_cell_hovered)

        # Palette
        self.palette_panel.color_selected.connect(self._on_color_selected)
        self.palette_panel.color_changed.connect(self._on_color_changed)
        self.palette_panel.color_added.connect(self._on_color_added)
        self.palette_panel.pen_size_changed.connect(self._on_pen_size_changed)

        # Reference image
        self.image_panel.convert_requested.connect(self._convert_image)
        self.image_panel.colors_suggested.connect(self._on_colors_suggested)
        self.image_panel.error_occurred.connect(
            lambda message: self._show_error("Image Error", message)
        )

        # Row reader
        self.instruction_panel.row_requested.connect(self._on_row_requested)
        self.instruction_panel.direction_toggled.connect(self._on_direction_toggled)
        self.instruction_panel.check_toggled.connect(self._on_check_toggled)
        self.instruction_panel.rotate_requested.connect(self._rotate)

        # Projects
        self.project_panel.save_requested.connect(self._save_project)
        self.project_panel.overwrite_requested.connect(self._overwrite_project)
        self.project_panel.open_requested.connect(self._open_project)
        self.project_panel.rename_requested.connect(self._rename_project)
        self.project_panel.favorite_toggled.connect(self._toggle_favorite)
        self.project_panel.delete_requested.connect(self._delete_project)

    def _on_workflow_step_changed(self, step: int):
        """Handle workflow step changes."""
        self.console_panel.append(f"Navigated to: {WorkflowStep(step).label}")
        if step == WorkflowStep.PROJECTS:
            self._refresh_projects()

    # === Rendering ===

    def _refresh_all(self):
        """Redraw every view from the session."""
        self._refresh_grid()
        self._refresh_palette()
        self._refresh_reader()
        self._refresh_projects()

    def _refresh_grid(self):
        self.central_workflow.show_pattern(self.session.grid, self.session.palette)
        size = self.session.size
        self.size_label.setText(f"{size.row} × {size.col}")
        self.undo_action.setEnabled(self.session.history.can_undo)
        self.redo_action.setEnabled(self.session.history.can_redo)

    def _refresh_palette(self):
        self.palette_panel.set_palette(self.session.palette, self.session.brush.active_color_id)
        self.palette_panel.set_pen_size(self.session.brush.pen_size)

    def _refresh_reader(self):
        reader = self.session.reader
        reading = reader.reading()
        self.instruction_panel.show_reading(
            reading, reader.total_rows, self.session.palette, reader.is_checked
        )
        self.read_canvas.set_highlight_row(reading.grid_row_index, reader.worked_grid_rows())
        self.central_workflow.set_step_detail(
            WorkflowStep.READ, f"Row {reading.row} of {reader.total_rows}"
        )

    def _refresh_projects(self):
        projects = self.store.list_projects()
        self.project_panel.set_projects(projects)
        self.central_workflow.set_step_detail(WorkflowStep.PROJECTS, f"{len(projects)} saved")

    # === Painting ===

    def _on_stroke_started(self, row: int, col: int):
        self.session.begin_stroke(row, col)
        self.central_workflow.show_pattern(self.session.grid, self.session.palette)

    def _on_stroke_moved(self, row: int, col: int):
        if not self.session.stroke_active:
            return
        self.session.continue_stroke(row, col)
        self.central_workflow.show_pattern(self.session.grid, self.session.palette)

    def _on_stroke_finished(self):
        if self.session.end_stroke():
            self._after_grid_change()

    def _on_cell_hovered(self, row: int, col: int):
        # Rows are numbered from the bottom, the way they are knitted
        total = self.session.size.row
        self.statusBar().showMessage(f"Row {total - row}, column {col + 1}")

    # === Whole-grid actions ===

    def _undo(self):
        if self.session.undo() is not None:
            self.console_panel.append("Undo")
            self._after_grid_change()

    def _redo(self):
        if self.session.redo() is not None:
            self.console_panel.append("Redo")
            self._after_grid_change()

    def _new_grid(self):
        size = GridSize(row=self.app_config.rows, col=self.app_config.cols)
        reply = QMessageBox.question(
            self,
            "New Grid",
            f"Replace the current pattern with a blank {size.row} × {size.col} grid?\n\n"
            "You can undo this.",
        )
        if reply != QMessageBox.StandardButton.Yes:
            return
        self._resize(size)

    def _resize(self, size: GridSize):
        try:
            self.session.resize(size)
        except PatternError as e:
            self._show_error("Invalid Size", str(e))
            return
        self.current_project_id = None
        self.console_panel.append(f"✓ New {size.row} × {size.col} grid")
        self._after_grid_change()

    def _clear_grid(self):
        self.session.clear()
        self.console_panel.append("Grid cleared")
        self._after_grid_change()

    def _rotate(self):
        self.session.rotate()
        size = self.session.size
        self.console_panel.append(
            f"↻ Rotated pattern to {size.row} × {size.col}; row reading restarted"
        )
        self._after_grid_change()

    def _after_grid_change(self):
        self._refresh_grid()
        self._refresh_reader()
        self._autosave()

    # === Palette ===

    def _on_color_selected(self, color_id: int):
        try:
            self.session.select_color(color_id)
        except PatternError as e:
            self._show_error("Palette Error", str(e))

    def _on_color_added(self):
        color_id = self.session.add_color()
        self.console_panel.append(f"Added colour {color_id}")
        self._after_palette_change()

    def _on_color_changed(self, color_id: int, color: str):
        try:
            self.session.update_color(color_id, color)
        except PatternError as e:
            self._show_error("Palette Error", str(e))
            return
        self.console_panel.append(f"Colour {color_id} set to {color}")
        self._after_palette_change()

    def _on_colors_suggested(self, colors: "list[str]"):
        for color in colors:
            self.session.add_color(color)
        self.console_panel.append(f"✓ Added {len(colors)} colours from the image")
        self._after_palette_change()

    def _on_pen_size_changed(self, pen_size: int):
        self.session.set_pen_size(pen_size)

    def _after_palette_change(self):
        self._refresh_palette()
        if self.image_panel.auto_convert():
            self._convert_image()
        else:
            self._refresh_grid()
            self._refresh_reader()
            self._autosave()

    # === Reference image ===

    def _convert_image(self):
        """Quantize the reference image into the current grid."""
        try:
            grid = self.image_panel.processor.convert(
                self.session.size,
                self.session.palette,
                self.image_panel.placement(),
            )
            self.session.apply_grid(grid)
        except (InvalidImage, PatternError) as e:
            self._show_error("Conversion Error", str(e))
            return

        self.image_panel.set_status("Converted. Paint over the result or adjust and convert again.")
        self.console_panel.append(
            f"🖼 Converted image to {self.session.size.row} × {self.session.size.col} "
            f"with {len(self.session.palette)} colours"
        )
        self._after_grid_change()

    # === Row reader ===

    def _on_row_requested(self, row: int):
        self.session.reader.go_to_row(row)
        self._refresh_reader()

    def _on_direction_toggled(self):
        direction = self.session.reader.toggle_direction()
        self.console_panel.append(
            f"Row {self.session.reader.current_row} now read {direction.value}"
        )
        self._refresh_reader()

    def _on_check_toggled(self, index: int):
        self.session.reader.toggle_checked(index)
        self._refresh_reader()

    # === Projects ===

    def _save_project(self, name: str):
        self._store_project(name, None)

    def _overwrite_project(self, project_id: str):
        project = self.store.get_project(project_id)
        if project is None:
            self._refresh_projects()
            return
        self._store_project(project.name, project_id)

    def _store_project(self, name: str, project_id: Optional[str]):
        try:
            project = self.store.save_project(
                name,
                self.session.grid,
                self.session.palette,
                self.session.size,
                project_id=project_id,
            )
        except (PatternError, OSError) as e:
            self._show_error("Save Error", str(e))
            return
        self.current_project_id = project.id
        self.console_panel.append(f"✓ Saved project '{project.name}'")
        self._refresh_projects()

    def _open_project(self, project_id: str):
        project = self.store.get_project(project_id)
        if project is None:
            self._show_error("Open Error", "That project no longer exists.")
            self._refresh_projects()
            return
        self.session.load(project.grid, project.palette, project.size)
        self.current_project_id = project.id
        self.console_panel.append(f"✓ Opened project '{project.name}'")
        self._refresh_palette()
        self._after_grid_change()

    def _rename_project(self, project_id: str, name: str):
        self._run_store_action(lambda: self.store.rename_project(project_id, name))

    def _toggle_favorite(self, project_id: str):
        self._run_store_action(lambda: self.store.toggle_favorite(project_id))

    def _delete_project(self, project_id: str):
        if self._run_store_action(lambda: self.store.delete_project(project_id)):
            if project_id == self.current_project_id:
                self.current_project_id = None
            self.console_panel.append("Project deleted")

    def _run_store_action(self, action) -> bool:
        try:
            result = action()
        except OSError as e:
            self._show_error("Project Error", str(e))
            return False
        self._refresh_projects()
        return bool(result)

    # === Persistence ===

    def _restore_state(self):
        """Reopen the pattern from the last session, if any."""
        state = self.store.load_state()
        if state is None:
            return
        grid, palette, size = state
        self.session.load(grid, palette, size)
        self.console_panel.append(f"✓ Restored {size.row} × {size.col} pattern")

    def _autosave(self):
        success, error = self.store.save_state(
            self.session.grid, self.session.palette, self.session.size
        )
        if not success:
            self.console_panel.append(f"❌ Autosave failed: {error}")

    # === Settings Dialog ===

    def _open_settings_dialog(self):
        """Open the settings dialog."""
        self.app_config.palette = list(self.session.palette)
        dialog = SettingsDialog(self.app_config, self)
        if not dialog.exec():  # User cancelled
            return

        previous = self.app_config
        self.app_config = dialog.get_values()

        if self.app_config.data_dir != previous.data_dir:
            self.store = ProjectStore(self.app_config.data_dir)
            self._autosave()
            self._refresh_projects()

        self.session.set_pen_size(self.app_config.pen_size)
        self.palette_panel.set_pen_size(self.app_config.pen_size)
        self.central_workflow.set_cell_size(self.app_config.cell_size)

        success, error = self.config_manager.save(self.app_config)
        if not success:
            self.console_panel.append(f"❌ Error saving config: {error}")
            QMessageBox.warning(self, "Save Error", f"Could not save configuration:\n{error}")
        else:
            self.console_panel.append("✓ Configuration saved")

        new_size = GridSize(row=self.app_config.rows, col=self.app_config.cols)
        if new_size != self.session.size:
            reply = QMessageBox.question(
                self,
                "Resize Grid?",
                f"Start a blank {new_size.row} × {new_size.col} grid now?\n\n"
                "The current pattern can be restored with Undo.",
            )
            if reply == QMessageBox.StandardButton.Yes:
                self._resize(new_size)

    # === Errors ===

    def _show_error(self, title: str, message: str):
        self.console_panel.append(f"❌ {title}: {message}")
        QMessageBox.critical(self, title, message)

    # === Application Lifecycle ===

    def closeEvent(self, a0):
        """Save the working pattern and settings when the window closes."""
        self._autosave()
        self.app_config.palette = list(self.session.palette)
        self.config_manager.save(self.app_config)
        if a0:
            a0.accept()
