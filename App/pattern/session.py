"""Editing session: the single owner of the pattern being worked on.

AIDEV-NOTE: The Qt widgets never mutate grid or palette data themselves.
They call these methods and re-render from the returned snapshots. Every
discrete action ends with exactly one history push; an in-progress stroke
does not push until end_stroke().
"""

from typing import Optional, Sequence

from errors import InvalidPalette
from models import NEW_COLOR, PEN_SIZES, BrushState, GridSize, HistoryEntry

from .grid import Grid, freeze_grid, make_grid, validate_grid
from .history import HistoryStack
from .instructions import RowReader
from .paint import paint_cell
from .palette import Palette, add_color, make_palette, update_color


class PatternSession:
    """Grid, palette, brush and history for the open pattern."""

    def __init__(self, size: GridSize, palette: "Sequence[str]", pen_size: int = 1):
        self.palette: Palette = make_palette(palette)
        self.size = size
        self.grid: Grid = make_grid(size)
        self.brush = BrushState(pen_size=pen_size, active_color_id=min(1, len(self.palette) - 1))
        self.history = HistoryStack()
        self._layout_id = 0
        self._layout_counter = 0
        self.history.push(self.grid, self.size, self._layout_id)
        self.reader = RowReader(self.grid)

        self._stroke_start: Optional[Grid] = None

    # === Brush ===

    def select_color(self, color_id: int) -> None:
        if not 0 <= color_id < len(self.palette):
            raise InvalidPalette(f"Colour id {color_id} is outside the palette")
        self.brush.active_color_id = color_id

    def set_pen_size(self, pen_size: int) -> None:
        if pen_size not in PEN_SIZES:
            raise ValueError(f"Pen size must be one of {PEN_SIZES}, got {pen_size}")
        self.brush.pen_size = pen_size

    # === Strokes ===

    @property
    def stroke_active(self) -> bool:
        return self._stroke_start is not None

    def begin_stroke(self, row: int, col: int) -> Grid:
        """Pointer pressed on (row, col)."""
        self._stroke_start = self.grid
        self.brush.last_painted_cell = None
        return self.continue_stroke(row, col)

    def continue_stroke(self, row: int, col: int) -> Grid:
        """Pointer dragged to (row, col); joins it to the previous sample."""
        if self._stroke_start is None:
            return self.begin_stroke(row, col)
        self._set_grid(
            paint_cell(
                self.grid,
                row,
                col,
                self.brush.active_color_id,
                self.brush.pen_size,
                self.brush.last_painted_cell,
                palette_length=len(self.palette),
            )
        )
        self.brush.last_painted_cell = (row, col)
        return self.grid

    def end_stroke(self) -> bool:
        """Pointer released: commit the stroke as one history entry.

        Returns:
            True if the stroke changed the grid and was recorded
        """
        start = self._stroke_start
        self._stroke_start = None
        self.brush.last_painted_cell = None
        if start is None or start == self.grid:
            return False
        self.history.push(self.grid, self.size, self._layout_id)
        return True

    # === Whole-grid actions ===

    def resize(self, size: GridSize) -> Grid:
        """Start a blank grid of a new size."""
        grid = make_grid(size)
        self.size = size
        self._new_layout()
        self._commit(grid)
        self.reader.reset(grid)
        return grid

    def clear(self) -> Grid:
        grid = make_grid(self.size)
        self._commit(grid)
        return grid

    def apply_grid(self, grid: "Sequence[Sequence[int]]") -> Grid:
        """Replace the grid with a converted image (same size)."""
        frozen = freeze_grid(grid)
        validate_grid(frozen, self.size, len(self.palette))
        self._commit(frozen)
        return frozen

    def rotate(self) -> Grid:
        """Rotate clockwise; the row reader restarts at row 1."""
        grid = self.reader.rotate()
        self.size = GridSize(row=self.size.col, col=self.size.row)
        self.grid = grid
        self._new_layout()
        self.history.push(grid, self.size, self._layout_id)
        return grid

    def undo(self) -> Optional[HistoryEntry]:
        return self._restore(self.history.undo())

    def redo(self) -> Optional[HistoryEntry]:
        return self._restore(self.history.redo())

    def load(self, grid: "Sequence[Sequence[int]]", palette: "Sequence[str]", size: GridSize) -> None:
        """Open saved work; history restarts from it."""
        new_palette = make_palette(palette)
        frozen = freeze_grid(grid)
        validate_grid(frozen, size, len(new_palette))
        self.palette = new_palette
        self.size = size
        self._stroke_start = None
        self.brush.last_painted_cell = None
        self.brush.active_color_id = min(self.brush.active_color_id, len(self.palette) - 1)
        self._set_grid(frozen)
        self.reader.reset(frozen)
        self._layout_id = 0
        self.history.reset(frozen, size, self._layout_id)

    # === Palette ===

    def add_color(self, color: str = NEW_COLOR) -> int:
        """Append a colour and make it the active one."""
        self.palette = add_color(self.palette, color)
        self.brush.active_color_id = len(self.palette) - 1
        return self.brush.active_color_id

    def update_color(self, color_id: int, color: str) -> Palette:
        self.palette = update_color(self.palette, color_id, color)
        return self.palette

    # === Internal ===

    def _set_grid(self, grid: Grid) -> None:
        self.grid = grid
        self.reader.set_grid(grid)

    def _commit(self, grid: Grid) -> None:
        self._stroke_start = None
        self.brush.last_painted_cell = None
        self._set_grid(grid)
        self.history.push(grid, self.size, self._layout_id)

    def _new_layout(self) -> None:
        # Ids only grow, so a discarded redo branch can never collide
        self._layout_counter += 1
        self._layout_id = self._layout_counter

    def _restore(self, entry: Optional[HistoryEntry]) -> Optional[HistoryEntry]:
        if entry is None:
            return None
        relaid = entry.layout_id != self._layout_id
        self.size = entry.size
        self._layout_id = entry.layout_id
        self._set_grid(entry.grid)
        if relaid:
            # Crossing a rotation or resize: row numbers no longer mean the same rows
            self.reader.reset(entry.grid)
        return entry
