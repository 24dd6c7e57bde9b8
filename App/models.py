"""Data models and constants for the StitchGrid pattern designer."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

# AIDEV-NOTE: Defaults match the original web editor so saved work lines up
DEFAULT_ROWS = 90
DEFAULT_COLS = 73
DEFAULT_PALETTE = ("#FFFFFF", "#000000", "#FF0000", "#00FF00", "#0000FF")
NEW_COLOR = "#CCCCCC"

HISTORY_LIMIT = 50
PEN_SIZES = (1, 2, 3)

# Configuration file path
CONFIG_FILE = Path.home() / ".stitchgrid_config.json"
DATA_DIR = Path.home() / ".stitchgrid"


class Direction(Enum):
    """Reading direction of a row.

    AIDEV-NOTE: RIGHT means the row is worked right-to-left, which is the
    natural direction for the first (bottom) row of a knitted piece.
    """

    RIGHT = "R"
    LEFT = "L"

    def flipped(self) -> "Direction":
        return Direction.LEFT if self is Direction.RIGHT else Direction.RIGHT


@dataclass(frozen=True)
class GridSize:
    """Grid dimensions: row is the vertical count, col the horizontal."""

    row: int
    col: int

    def to_dict(self) -> dict:
        return {"row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: dict) -> "GridSize":
        return cls(row=int(data["row"]), col=int(data["col"]))


@dataclass(frozen=True)
class Placement:
    """Where a reference image sits inside the grid.

    scale grows or shrinks the fitted image about its centre; offsets are a
    translation measured in grid cells.
    """

    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0


@dataclass
class BrushState:
    """Current brush used by the paint engine."""

    pen_size: int = 1
    active_color_id: int = 1
    last_painted_cell: "Optional[tuple[int, int]]" = None


@dataclass(frozen=True)
class HistoryEntry:
    """One undoable snapshot of the pattern.

    AIDEV-NOTE: layout_id changes whenever rows stop meaning the same rows
    (rotation, resize), so restoring an entry knows to restart the row reader.
    """

    grid: "tuple[tuple[int, ...], ...]"
    size: GridSize
    layout_id: int = 0


@dataclass(frozen=True)
class Instruction:
    """Work `count` stitches of palette colour `color_id`."""

    color_id: int
    count: int


@dataclass(frozen=True)
class RowReading:
    """Decoded instructions for the row currently being worked.

    AIDEV-NOTE: grid_row_index is the storage index (top row = 0) so the
    view can highlight the row without redoing the bottom-up arithmetic.
    """

    row: int
    direction: Direction
    instructions: "tuple[Instruction, ...]"
    grid_row_index: int


@dataclass
class AppConfig:
    """User-editable application settings."""

    # New grid dimensions (cells)
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    # Palette used for new patterns
    palette: "list[str]" = field(default_factory=lambda: list(DEFAULT_PALETTE))

    # Painting
    pen_size: int = 1
    cell_size: int = 10  # pixels per cell on screen

    # Reference image overlay opacity (0-1)
    image_opacity: float = 0.4

    # Where working state and saved projects live
    data_dir: str = str(DATA_DIR)


@dataclass
class Project:
    """A named pattern snapshot kept by the project store."""

    id: str
    name: str
    grid: "tuple[tuple[int, ...], ...]"
    size: GridSize
    palette: "tuple[str, ...]"
    updated_at: float = 0.0  # seconds since the epoch
    thumbnail: Optional[str] = None  # PNG data URL
    is_favorite: bool = False
