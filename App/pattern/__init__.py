"""Pattern core: grids, palettes, painting, history and row instructions.

AIDEV-NOTE: Nothing in this package imports Qt. The ui package drives it
through PatternSession; tests exercise it directly.
"""

from .grid import make_grid, rotate_clockwise
from .history import HistoryStack
from .instructions import RowReader, decode_row, resolve_direction
from .paint import paint_cell
from .session import PatternSession

__all__ = [
    "HistoryStack",
    "PatternSession",
    "RowReader",
    "decode_row",
    "make_grid",
    "paint_cell",
    "resolve_direction",
    "rotate_clockwise",
]
