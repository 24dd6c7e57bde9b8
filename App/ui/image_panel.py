"""Reference image import, placement and conversion panel."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from errors import InvalidImage
from image_processing import ImageProcessor
from models import Placement
from ui.styles import SIZES, panel_stylesheet
from ui.widgets import WidgetFactory


class ImagePanel(QGroupBox):
    """Panel for loading a reference image and converting it into the grid."""

    # Signals for communication with main window
    image_loaded = pyqtSignal(object)  # QPixmap
    image_cleared = pyqtSignal()
    placement_changed = pyqtSignal(object)  # Placement
    opacity_changed = pyqtSignal(float)
    convert_requested = pyqtSignal()
    colors_suggested = pyqtSignal(list)  # list[str] hex colours
    error_occurred = pyqtSignal(str)

    def __init__(self, image_opacity: float = 0.4, parent: QWidget | None = None):
        super().__init__("Reference Image", parent)
        self.processor = ImageProcessor()
        self.image_opacity = image_opacity

        self._setup_ui()
        self._connect_signals()
        self._set_image_controls_enabled(False)

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self._create_file_selection(layout)
        self._create_preview_area(layout)
        self._create_placement_controls(layout)
        self._create_palette_controls(layout)
        self._create_action_buttons(layout)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        layout.addStretch()
        self.setLayout(layout)

    def _create_file_selection(self, parent_layout: QVBoxLayout):
        """Create file selection controls."""
        file_layout = QHBoxLayout()

        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        file_layout.addWidget(self.browse_btn)

        self.remove_btn = QPushButton("Remove")
        self.remove_btn.setToolTip("Hide the reference image")
        file_layout.addWidget(self.remove_btn)

        parent_layout.addLayout(file_layout)

    def _create_preview_area(self, parent_layout: QVBoxLayout):
        """Create image preview thumbnail."""
        self.preview_label = QLabel()
        self.preview_label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        self.preview_label.setMaximumSize(*SIZES.PREVIEW_MAX_SIZE)
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.preview_label.setStyleSheet(panel_stylesheet())
        self.preview_label.setText("Image preview will appear here")
        parent_layout.addWidget(self.preview_label)

    def _create_placement_controls(self, parent_layout: QVBoxLayout):
        """Create scale/offset/opacity controls."""
        placement_group = QGroupBox("Placement")
        form = QFormLayout()

        self.scale_spin = WidgetFactory.create_double_spinbox(
            0.1, 10.0, 1.0, "×", decimals=2, step=0.05,
            tooltip="Grow or shrink the image about its centre",
        )
        form.addRow("Scale:", self.scale_spin)

        self.offset_x_spin = WidgetFactory.create_double_spinbox(
            -1000.0, 1000.0, 0.0, " cells", decimals=1, step=0.5,
            tooltip="Move the image right (positive) or left",
        )
        form.addRow("Offset X:", self.offset_x_spin)

        self.offset_y_spin = WidgetFactory.create_double_spinbox(
            -1000.0, 1000.0, 0.0, " cells", decimals=1, step=0.5,
            tooltip="Move the image down (positive) or up",
        )
        form.addRow("Offset Y:", self.offset_y_spin)

        opacity_row = QHBoxLayout()
        self.opacity_slider, self.opacity_label = WidgetFactory.create_slider_with_label(
            0, 100, int(self.image_opacity * 100), "{}%",
            tooltip="Opacity of the image drawn over the grid",
        )
        opacity_row.addWidget(self.opacity_slider)
        opacity_row.addWidget(self.opacity_label)
        form.addRow("Overlay:", opacity_row)

        placement_group.setLayout(form)
        parent_layout.addWidget(placement_group)

    def _create_palette_controls(self, parent_layout: QVBoxLayout):
        """Create palette suggestion controls."""
        palette_group = QGroupBox("Colours From Image")
        palette_layout = QVBoxLayout()

        colors_layout = QHBoxLayout()
        colors_layout.addWidget(QLabel("Colours:"))
        self.num_colors_slider, self.num_colors_label = WidgetFactory.create_slider_with_label(
            2, 32, 8, tick_interval=4,
        )
        colors_layout.addWidget(self.num_colors_slider)
        colors_layout.addWidget(self.num_colors_label)
        palette_layout.addLayout(colors_layout)

        method_layout = QHBoxLayout()
        method_layout.addWidget(QLabel("Method:"))
        self.quant_method_combo = QComboBox()
        self.quant_method_combo.addItems(
            [
                "K-Means (Best quality)",
                "Median Cut (Faster)",
                "Octree (Fastest)",
            ]
        )
        method_layout.addWidget(self.quant_method_combo)
        palette_layout.addLayout(method_layout)

        self.suggest_btn = QPushButton("Add Suggested Colours")
        self.suggest_btn.setToolTip("Append the image's main colours to the palette")
        palette_layout.addWidget(self.suggest_btn)

        palette_group.setLayout(palette_layout)
        parent_layout.addWidget(palette_group)

    def _create_action_buttons(self, parent_layout: QVBoxLayout):
        """Create convert controls."""
        self.convert_btn = QPushButton("Convert to Grid")
        self.convert_btn.setToolTip("Replace the grid with the image, matched to the palette")
        parent_layout.addWidget(self.convert_btn)

        self.auto_convert_check = QCheckBox("Re-convert when the palette changes")
        self.auto_convert_check.setToolTip(
            "Refresh the conversion from the original image after palette edits"
        )
        parent_layout.addWidget(self.auto_convert_check)

    def _connect_signals(self):
        """Connect internal signals to handlers."""
        self.browse_btn.clicked.connect(self._on_browse_clicked)
        self.remove_btn.clicked.connect(self._on_remove_clicked)
        self.convert_btn.clicked.connect(self.convert_requested.emit)
        self.suggest_btn.clicked.connect(self._on_suggest_clicked)
        self.opacity_slider.valueChanged.connect(
            lambda v: self.opacity_changed.emit(v / 100.0)
        )
        for spin in (self.scale_spin, self.offset_x_spin, self.offset_y_spin):
            spin.valueChanged.connect(self._on_placement_changed)

    # === Event Handlers ===

    def _on_browse_clicked(self):
        """Handle browse button click."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp);;All Files (*)",
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path: str):
        """Decode an image, show its preview and hand it to the canvas."""
        try:
            self.processor.load_image(file_path)
        except InvalidImage as e:
            self.status_label.setText(f"Error: {e}")
            self.error_occurred.emit(str(e))
            return

        self.file_path_label.setText(f"Selected: {Path(file_path).name}")

        pixmap = QPixmap(file_path)
        if not pixmap.isNull():
            scaled = pixmap.scaled(
                SIZES.PREVIEW_MAX_SIZE[0],
                SIZES.PREVIEW_MAX_SIZE[1],
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            self.preview_label.setPixmap(scaled)
        else:
            self.preview_label.setText("Preview not available")

        self._set_image_controls_enabled(True)
        self.status_label.setText("Image loaded. Adjust placement, then convert.")
        self.image_loaded.emit(pixmap)

    def _on_remove_clicked(self):
        self.processor.clear_image()
        self.file_path_label.setText("No image selected")
        self.preview_label.clear()
        self.preview_label.setText("Image preview will appear here")
        self.status_label.setText("")
        self._set_image_controls_enabled(False)
        self.image_cleared.emit()

    def _on_placement_changed(self, _value=None):
        self.placement_changed.emit(self.placement())

    def _on_suggest_clicked(self):
        methods = ["kmeans", "median_cut", "octree"]
        method = methods[self.quant_method_combo.currentIndex()]
        try:
            colors = self.processor.suggest_palette(self.num_colors_slider.value(), method)
        except InvalidImage as e:
            self.error_occurred.emit(str(e))
            return
        self.status_label.setText(f"Suggested {len(colors)} colours.")
        self.colors_suggested.emit(colors)

    # === Public Methods ===

    def placement(self) -> Placement:
        return Placement(
            scale=self.scale_spin.value(),
            offset_x=self.offset_x_spin.value(),
            offset_y=self.offset_y_spin.value(),
        )

    def auto_convert(self) -> bool:
        """Whether palette edits should refresh the conversion."""
        return self.auto_convert_check.isChecked() and self.processor.has_image

    def set_status(self, message: str):
        self.status_label.setText(message)

    def _set_image_controls_enabled(self, enabled: bool):
        for widget in (
            self.remove_btn,
            self.convert_btn,
            self.suggest_btn,
            self.scale_spin,
            self.offset_x_spin,
            self.offset_y_spin,
            self.auto_convert_check,
        ):
            widget.setEnabled(enabled)
