"""Row instruction panel for working a pattern stitch by stitch."""

from typing import Callable, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from models import Direction, RowReading
from ui.styles import FONTS, SIZES
from ui.widgets import WidgetFactory


class InstructionPanel(QGroupBox):
    """Shows the current row as "N stitches of colour X" steps.

    AIDEV-NOTE: The panel only renders RowReading snapshots. Navigation,
    direction toggles and checkmarks are reported through signals and applied
    to the session's RowReader by the main window.
    """

    row_requested = pyqtSignal(int)  # 1-based row from the bottom
    direction_toggled = pyqtSignal()
    check_toggled = pyqtSignal(int)  # instruction index
    rotate_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__("Row Instructions", parent)
        self._updating = False
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.row_label = QLabel("Row 1")
        self.row_label.setFont(FONTS.ROW_TITLE)
        layout.addWidget(self.row_label)

        # Row navigation
        nav_layout = QHBoxLayout()
        self.prev_btn = QPushButton("▼ Previous")
        self.prev_btn.setToolTip("Go down one row")
        nav_layout.addWidget(self.prev_btn)

        self.row_spin = QSpinBox()
        self.row_spin.setMinimum(1)
        self.row_spin.setPrefix("Row ")
        nav_layout.addWidget(self.row_spin)

        self.next_btn = QPushButton("Next ▲")
        self.next_btn.setToolTip("Go up one row")
        nav_layout.addWidget(self.next_btn)
        layout.addLayout(nav_layout)

        # Direction
        direction_layout = QHBoxLayout()
        self.direction_label = QLabel("")
        direction_layout.addWidget(self.direction_label, stretch=1)
        self.direction_btn = QPushButton("⇄ Flip Direction")
        self.direction_btn.setToolTip("Read this row the other way round")
        direction_layout.addWidget(self.direction_btn)
        layout.addLayout(direction_layout)

        self.instruction_list = QListWidget()
        self.instruction_list.setFont(FONTS.INSTRUCTION)
        layout.addWidget(self.instruction_list, stretch=1)

        self.summary_label = QLabel("")
        self.summary_label.setStyleSheet("color: #888;")
        layout.addWidget(self.summary_label)

        self.rotate_btn = QPushButton("↻ Rotate Pattern 90°")
        self.rotate_btn.setToolTip(
            "Turn the whole pattern clockwise (resets rows, directions and checkmarks)"
        )
        self.rotate_btn.setMinimumHeight(SIZES.NAV_BUTTON_HEIGHT)
        layout.addWidget(self.rotate_btn)

        self.setLayout(layout)

        self.prev_btn.clicked.connect(lambda: self.row_requested.emit(self.row_spin.value() - 1))
        self.next_btn.clicked.connect(lambda: self.row_requested.emit(self.row_spin.value() + 1))
        self.row_spin.valueChanged.connect(self._on_row_spin_changed)
        self.direction_btn.clicked.connect(self.direction_toggled.emit)
        self.rotate_btn.clicked.connect(self.rotate_requested.emit)
        self.instruction_list.itemChanged.connect(self._on_item_changed)

    def show_reading(
        self,
        reading: RowReading,
        total_rows: int,
        palette: Sequence[str],
        is_checked: Callable[[int], bool],
    ):
        """Render one row.

        Args:
            reading: Decoded row snapshot
            total_rows: Number of rows in the grid
            palette: Hex colours for the swatch icons
            is_checked: Completed flag lookup by instruction index
        """
        self._updating = True
        try:
            self.row_label.setText(f"Row {reading.row} of {total_rows}")
            self.row_spin.setMaximum(total_rows)
            self.row_spin.setValue(reading.row)
            self.prev_btn.setEnabled(reading.row > 1)
            self.next_btn.setEnabled(reading.row < total_rows)

            if reading.direction is Direction.RIGHT:
                self.direction_label.setText("← Read right to left")
            else:
                self.direction_label.setText("→ Read left to right")

            self.instruction_list.clear()
            for index, instruction in enumerate(reading.instructions):
                color = palette[instruction.color_id]
                item = QListWidgetItem(
                    WidgetFactory.create_color_icon(color),
                    f"{instruction.count} × colour {instruction.color_id} ({color})",
                )
                item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                item.setCheckState(
                    Qt.CheckState.Checked if is_checked(index) else Qt.CheckState.Unchecked
                )
                item.setData(Qt.ItemDataRole.UserRole, index)
                self.instruction_list.addItem(item)

            stitches = sum(i.count for i in reading.instructions)
            done = sum(1 for i in range(len(reading.instructions)) if is_checked(i))
            self.summary_label.setText(
                f"{stitches} stitches in {len(reading.instructions)} steps, {done} done"
            )
        finally:
            self._updating = False

    def _on_row_spin_changed(self, value: int):
        if not self._updating:
            self.row_requested.emit(value)

    def _on_item_changed(self, item: QListWidgetItem):
        if not self._updating:
            self.check_toggled.emit(item.data(Qt.ItemDataRole.UserRole))

