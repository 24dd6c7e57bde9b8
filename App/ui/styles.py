"""Centralized styling constants for the StitchGrid UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor, QFont


class GridColors:
    """Colors used when drawing the pattern grid."""

    BACKGROUND = QColor(20, 20, 20)
    GRID_LINE = QColor(0, 0, 0)
    GRID_LINE_MAJOR = QColor(90, 90, 90)  # every 10 cells

    # Row reader highlighting
    CURRENT_ROW = QColor(255, 200, 0)
    WORKED_ROW_SHADE = QColor(0, 0, 0, 110)  # drawn over finished rows


class ThemeColors:
    """Application theme colors for panels and buttons."""

    BACKGROUND_PANEL = "#2a2a2a"
    BORDER_DEFAULT = "gray"
    ACCENT = "#3d5a80"
    ACCENT_HOVER = "#4d6a90"
    ACCENT_PRESSED = "#2d4a70"
    SELECTED_SWATCH = "#ffc800"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)
    ROW_TITLE = QFont("Arial", 16, QFont.Weight.Bold)
    INSTRUCTION = QFont("Arial", 12)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 100

    # Image preview
    PREVIEW_MIN_SIZE = (200, 150)
    PREVIEW_MAX_SIZE = (320, 240)

    # Palette swatches
    SWATCH_SIZE = 28
    SWATCHES_PER_ROW = 8

    # Grid canvas
    GRID_PADDING = 20  # pixels
    MAJOR_LINE_EVERY = 10  # cells

    # Buttons and controls
    NAV_BUTTON_HEIGHT = 35


# Convenience aliases
GRID = GridColors
COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def swatch_stylesheet(color: str, selected: bool) -> str:
    """Stylesheet for a palette swatch button.

    Args:
        color: Swatch fill as #RRGGBB
        selected: Whether this is the active brush colour

    Returns:
        CSS stylesheet string
    """
    border = (
        f"3px solid {ThemeColors.SELECTED_SWATCH}"
        if selected
        else f"1px solid {ThemeColors.BORDER_DEFAULT}"
    )
    return f"background-color: {color}; border: {border}; border-radius: 3px;"


def nav_button_stylesheet() -> str:
    """Standard accent button style used for page navigation."""
    return f"""
        QPushButton {{
            background-color: {ThemeColors.ACCENT};
            color: white;
            border: none;
            border-radius: 4px;
            padding: 8px 20px;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background-color: {ThemeColors.ACCENT_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {ThemeColors.ACCENT_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: #333;
            color: #666;
        }}
    """


def panel_stylesheet() -> str:
    """Generate standard panel stylesheet with border and background.

    Returns:
        CSS stylesheet string for panel styling
    """
    return (
        f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; "
        f"background-color: {ThemeColors.BACKGROUND_PANEL};"
    )


def step_indicator_stylesheet(active: bool) -> str:
    """Style for one workflow step button in the step bar."""
    if active:
        return f"""
            QPushButton {{
                background-color: {ThemeColors.ACCENT};
                color: white;
                border: 2px solid #5d7a9d;
                border-radius: 4px;
                padding: 6px 16px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {ThemeColors.ACCENT_HOVER};
            }}
        """
    return f"""
        QPushButton {{
            background-color: {ThemeColors.BACKGROUND_PANEL};
            color: #888;
            border: 1px solid #444;
            border-radius: 4px;
            padding: 6px 16px;
        }}
        QPushButton:hover {{
            background-color: #3a3a3a;
            color: #aaa;
        }}
    """
