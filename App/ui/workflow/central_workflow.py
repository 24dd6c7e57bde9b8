"""Central workflow widget that manages the main application workflow."""

from typing import Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from models import AppConfig
from ui.grid_canvas import GridCanvas
from ui.image_panel import ImagePanel
from ui.instruction_panel import InstructionPanel
from ui.palette_panel import PalettePanel
from ui.project_panel import ProjectPanel
from ui.workflow.models import WorkflowStep
from ui.workflow.step_bar import WorkflowStepBar
from ui.workflow.pages.edit_page import EditPage
from ui.workflow.pages.read_page import ReadPage
from ui.workflow.pages.projects_page import ProjectsPage


class CentralWorkflowWidget(QWidget):
    """
    Central widget managing the main application workflow.

    Organizes the workflow into steps:
    - Design: Paint the grid, edit the palette, convert a reference image
    - Knit: Read the pattern row by row
    - Projects: Save, open and organise named patterns
    """

    # AIDEV-NOTE: Workflow navigation signal - emitted when step changes
    step_changed = pyqtSignal(int)  # WorkflowStep value

    def __init__(self, app_config: AppConfig, parent: QWidget | None = None):
        super().__init__(parent)
        self.app_config = app_config

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self) -> None:
        """Initialize the workflow UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Step bar at the top
        self.step_bar = WorkflowStepBar()
        layout.addWidget(self.step_bar)

        # Stacked widget for page content
        self.stack = QStackedWidget()
        layout.addWidget(self.stack, stretch=1)

        self.edit_page = EditPage(self.app_config)
        self.read_page = ReadPage(self.app_config)
        self.projects_page = ProjectsPage()

        # Add pages to stack in WorkflowStep order
        self.stack.addWidget(self.edit_page)  # 0 = EDIT
        self.stack.addWidget(self.read_page)  # 1 = READ
        self.stack.addWidget(self.projects_page)  # 2 = PROJECTS

    def _connect_signals(self) -> None:
        """Connect all internal signals."""
        self.step_bar.step_selected.connect(self._on_step_selected)

        self.edit_page.go_to_read.connect(lambda: self.set_current_step(WorkflowStep.READ))
        self.edit_page.go_to_projects.connect(
            lambda: self.set_current_step(WorkflowStep.PROJECTS)
        )
        self.read_page.go_to_edit.connect(lambda: self.set_current_step(WorkflowStep.EDIT))
        self.projects_page.go_to_edit.connect(lambda: self.set_current_step(WorkflowStep.EDIT))

    def _on_step_selected(self, step_value: int) -> None:
        """Handle step selection from step bar."""
        self.set_current_step(WorkflowStep(step_value))

    # === Public Methods ===

    def set_current_step(self, step: WorkflowStep) -> None:
        """Navigate to a specific workflow step."""
        self.step_bar.set_current_step(step)
        self.stack.setCurrentIndex(int(step))
        self.step_changed.emit(int(step))

    def get_current_step(self) -> WorkflowStep:
        """Get the currently active step."""
        return self.step_bar.get_current_step()

    def show_pattern(self, grid: Sequence[Sequence[int]], palette: Sequence[str]) -> None:
        """Push a grid/palette snapshot to both canvases."""
        self.edit_page.get_canvas().set_pattern(grid, palette)
        self.read_page.get_canvas().set_pattern(grid, palette)

    def set_step_detail(self, step: WorkflowStep, detail: str) -> None:
        self.step_bar.set_step_detail(step, detail)

    def set_cell_size(self, cell_size: int) -> None:
        for canvas in (self.edit_page.get_canvas(), self.read_page.get_canvas()):
            canvas.cell_size = cell_size
            canvas.updateGeometry()

    # === Access to Embedded Panels ===

    def get_edit_canvas(self) -> GridCanvas:
        return self.edit_page.get_canvas()

    def get_read_canvas(self) -> GridCanvas:
        return self.read_page.get_canvas()

    def get_palette_panel(self) -> PalettePanel:
        return self.edit_page.get_palette_panel()

    def get_image_panel(self) -> ImagePanel:
        """Get the embedded ImagePanel for signal connections."""
        return self.edit_page.get_image_panel()

    def get_instruction_panel(self) -> InstructionPanel:
        return self.read_page.get_instruction_panel()

    def get_project_panel(self) -> ProjectPanel:
        return self.projects_page.get_project_panel()
