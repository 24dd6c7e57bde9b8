"""Application settings panel."""

from PyQt6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from models import AppConfig, DEFAULT_COLS, DEFAULT_ROWS, PEN_SIZES
from ui.widgets import WidgetFactory


class ConfigPanel(QGroupBox):
    """Panel for new-grid dimensions, painting and overlay defaults."""

    def __init__(self, app_config: AppConfig, parent=None):
        super().__init__("Settings", parent)
        self.app_config = app_config
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        main_layout = QVBoxLayout()

        # --- Grid Group ---
        grid_group = QGroupBox("New Grid")
        grid_layout = QFormLayout()
        self.rows_input = WidgetFactory.create_int_spinbox(
            1, 500, self.app_config.rows, " rows"
        )
        grid_layout.addRow("Height:", self.rows_input)

        self.cols_input = WidgetFactory.create_int_spinbox(
            1, 500, self.app_config.cols, " columns"
        )
        grid_layout.addRow("Width:", self.cols_input)

        grid_group.setLayout(grid_layout)
        main_layout.addWidget(grid_group)

        # --- Editor Group ---
        editor_group = QGroupBox("Editor")
        editor_layout = QFormLayout()
        self.pen_size_input = WidgetFactory.create_int_spinbox(
            min(PEN_SIZES), max(PEN_SIZES), self.app_config.pen_size, " cells",
            tooltip="Brush width used on startup",
        )
        editor_layout.addRow("Pen size:", self.pen_size_input)

        self.cell_size_input = WidgetFactory.create_int_spinbox(
            2, 60, self.app_config.cell_size, " px",
            tooltip="Preferred on-screen size of one cell",
        )
        editor_layout.addRow("Cell size:", self.cell_size_input)

        self.opacity_input = WidgetFactory.create_double_spinbox(
            0.0, 1.0, self.app_config.image_opacity, decimals=2, step=0.05,
            tooltip="Reference image opacity over the grid",
        )
        editor_layout.addRow("Image opacity:", self.opacity_input)

        editor_group.setLayout(editor_layout)
        main_layout.addWidget(editor_group)

        # --- Storage Group ---
        storage_group = QGroupBox("Storage")
        storage_layout = QHBoxLayout()
        self.data_dir_input = QLineEdit(self.app_config.data_dir)
        self.data_dir_input.setToolTip("Folder for the working pattern and saved projects")
        storage_layout.addWidget(self.data_dir_input)
        storage_group.setLayout(storage_layout)
        main_layout.addWidget(storage_group)

        # --- Reset Button ---
        self.reset_btn = QPushButton("↺ Reset to Defaults")
        self.reset_btn.setToolTip(f"Reset to default values ({DEFAULT_ROWS}×{DEFAULT_COLS} grid)")
        self.reset_btn.clicked.connect(lambda: self.set_values(AppConfig()))
        main_layout.addWidget(self.reset_btn)

        main_layout.addStretch()
        self.setLayout(main_layout)

    def get_values(self) -> AppConfig:
        """Get input values as AppConfig."""
        return AppConfig(
            rows=self.rows_input.value(),
            cols=self.cols_input.value(),
            palette=list(self.app_config.palette),  # edited in the palette panel
            pen_size=self.pen_size_input.value(),
            cell_size=self.cell_size_input.value(),
            image_opacity=self.opacity_input.value(),
            data_dir=self.data_dir_input.text().strip() or self.app_config.data_dir,
        )

    def set_values(self, config: AppConfig):
        """Set input values."""
        self.rows_input.setValue(config.rows)
        self.cols_input.setValue(config.cols)
        self.pen_size_input.setValue(config.pen_size)
        self.cell_size_input.setValue(config.cell_size)
        self.opacity_input.setValue(config.image_opacity)
        self.data_dir_input.setText(config.data_dir)
