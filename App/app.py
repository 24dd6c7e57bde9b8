"""StitchGrid - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import PatternStudioWindow


def main():
    """Launch the StitchGrid pattern designer."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("StitchGrid")
    app.setApplicationName("StitchGrid")
    app.setOrganizationName("StitchGrid")

    window = PatternStudioWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
