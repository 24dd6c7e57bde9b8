"""Horizontal step bar for switching between design, knitting and projects."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QWidget,
)

from ui.styles import step_indicator_stylesheet
from ui.workflow.models import WorkflowStep


class WorkflowStepIndicator(QPushButton):
    """Step button showing the step name and a short live detail line.

    e.g. "🧶 2. Knit" over "Row 12 of 90".
    """

    def __init__(self, step: WorkflowStep, parent: QWidget | None = None):
        super().__init__(parent)
        self.step = step
        self.detail = ""

        self.setCheckable(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMinimumHeight(44)
        self._update_text()
        self.set_active(False)

    def set_active(self, active: bool) -> None:
        self.setChecked(active)
        self.setStyleSheet(step_indicator_stylesheet(active))

    def set_detail(self, detail: str) -> None:
        self.detail = detail
        self._update_text()

    def _update_text(self) -> None:
        title = f"{self.step.icon} {self.step.label}"
        self.setText(f"{title}\n{self.detail}" if self.detail else title)


class WorkflowStepBar(QFrame):
    """Horizontal bar with clickable workflow step indicators."""

    # Emitted when a step is selected
    step_selected = pyqtSignal(int)  # WorkflowStep value

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._current_step = WorkflowStep.EDIT
        self._indicators: dict[WorkflowStep, WorkflowStepIndicator] = {}

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Initialize the step bar UI."""
        self.setFrameStyle(QFrame.Shape.StyledPanel | QFrame.Shadow.Raised)
        self.setStyleSheet("QFrame { background-color: #1a1a1a; border-bottom: 1px solid #333; }")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 5, 10, 5)
        layout.setSpacing(5)

        steps = list(WorkflowStep)
        for step in steps:
            indicator = WorkflowStepIndicator(step)
            indicator.clicked.connect(lambda checked, s=step: self._on_step_clicked(s))
            self._indicators[step] = indicator
            layout.addWidget(indicator)

            if step != steps[-1]:
                arrow = QLabel("→")
                arrow.setStyleSheet("color: #555; font-size: 16px;")
                arrow.setAlignment(Qt.AlignmentFlag.AlignCenter)
                arrow.setFixedWidth(30)
                layout.addWidget(arrow)

        self._update_indicators()

    def _on_step_clicked(self, step: WorkflowStep) -> None:
        if step != self._current_step:
            self.set_current_step(step)
            self.step_selected.emit(int(step))
        else:
            # Clicking the active step would uncheck it
            self._update_indicators()

    def set_current_step(self, step: WorkflowStep) -> None:
        self._current_step = step
        self._update_indicators()

    def set_step_detail(self, step: WorkflowStep, detail: str) -> None:
        """Show a short status line under a step's name."""
        self._indicators[step].set_detail(detail)

    def _update_indicators(self) -> None:
        for step, indicator in self._indicators.items():
            indicator.set_active(step == self._current_step)

    def get_current_step(self) -> WorkflowStep:
        return self._current_step
