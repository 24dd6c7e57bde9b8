"""Activity log panel."""

import time

from PyQt6.QtWidgets import QGroupBox, QPlainTextEdit, QPushButton, QVBoxLayout

from ui.styles import FONTS, SIZES

MAX_LOG_LINES = 1000


class ConsolePanel(QGroupBox):
    """Timestamped log of what the editor did (conversions, saves, errors)."""

    def __init__(self, parent=None):
        super().__init__(None, parent)
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumBlockCount(MAX_LOG_LINES)  # oldest lines drop off
        # AIDEV-NOTE: Use minimum height only - let dock widget handle sizing
        self.log_view.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.log_view.setFont(FONTS.CONSOLE)
        layout.addWidget(self.log_view)

        clear_btn = QPushButton("Clear Log")
        clear_btn.clicked.connect(self.clear)
        layout.addWidget(clear_btn)

        self.setLayout(layout)

    def append(self, message: str):
        """Add a timestamped line and keep the newest one visible."""
        self.log_view.appendPlainText(f"[{time.strftime('%H:%M:%S')}] {message}")
        scrollbar = self.log_view.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())

    def clear(self):
        self.log_view.clear()
