"""UI components for the StitchGrid pattern designer.

This package contains modular UI panels that can be easily rearranged
in the application layout.
"""

from ui.config_panel import ConfigPanel
from ui.console_panel import ConsolePanel
from ui.grid_canvas import GridCanvas
from ui.image_panel import ImagePanel
from ui.instruction_panel import InstructionPanel
from ui.main_window import PatternStudioWindow
from ui.palette_panel import PalettePanel
from ui.project_panel import ProjectPanel

__all__ = [
    "PatternStudioWindow",
    "ConfigPanel",
    "ConsolePanel",
    "GridCanvas",
    "ImagePanel",
    "InstructionPanel",
    "PalettePanel",
    "ProjectPanel",
]
