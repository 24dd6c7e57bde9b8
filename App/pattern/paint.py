"""Brush painting with line interpolation.

AIDEV-NOTE: Pointer samples during a fast drag can be several cells apart.
Each sample is joined to the previous one with an interpolated line so the
stroke has no gaps; the brush square is stamped at every point on that line.
"""

import math
from typing import Iterable, Optional, Tuple

from errors import InvalidPalette
from models import PEN_SIZES

from .grid import Grid, grid_size

Cell = Tuple[int, int]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (JavaScript Math.round)."""
    return math.floor(value + 0.5)


def interpolate_line(start: Cell, end: Cell) -> "list[tuple[int, int]]":
    """Integer cells from `start` to `end` inclusive.

    Uses max(|drow|, |dcol|) steps and rounds each interpolated point, so a
    shallow line may repeat a cell but never skips one.
    """
    r0, c0 = start
    r1, c1 = end
    steps = max(abs(r1 - r0), abs(c1 - c0))
    if steps == 0:
        return [(r1, c1)]

    points = []
    for i in range(steps + 1):
        t = i / steps
        points.append(
            (round_half_up(r0 + (r1 - r0) * t), round_half_up(c0 + (c1 - c0) * t))
        )
    return points


def brush_cells(row: int, col: int, pen_size: int) -> "list[tuple[int, int]]":
    """Cells covered by a square brush of side `pen_size` at (row, col).

    The top-left corner sits floor(pen_size / 2) cells up and left, so even
    brushes lean towards lower indices.
    """
    if pen_size not in PEN_SIZES:
        raise ValueError(f"Pen size must be one of {PEN_SIZES}, got {pen_size}")
    half = pen_size // 2
    return [
        (row - half + dr, col - half + dc)
        for dr in range(pen_size)
        for dc in range(pen_size)
    ]


def stroke_cells(
    row: int,
    col: int,
    pen_size: int,
    previous_cell: Optional[Cell] = None,
) -> "list[tuple[int, int]]":
    """Every cell a brush sample touches, including the joining line."""
    if previous_cell is not None:
        centers = interpolate_line(previous_cell, (row, col))
    else:
        centers = [(row, col)]
    cells = []
    seen = set()
    for center_row, center_col in centers:
        for cell in brush_cells(center_row, center_col, pen_size):
            if cell not in seen:
                seen.add(cell)
                cells.append(cell)
    return cells


def set_cells(grid: Grid, cells: Iterable[Cell], color_id: int) -> Grid:
    """New grid with `cells` set to `color_id`; out-of-bounds cells are skipped.

    Only the rows that actually change are copied.
    """
    size = grid_size(grid)
    changes: "dict[int, dict[int, int]]" = {}
    for r, c in cells:
        if 0 <= r < size.row and 0 <= c < size.col and grid[r][c] != color_id:
            changes.setdefault(r, {})[c] = color_id

    if not changes:
        return grid

    rows = list(grid)
    for r, row_changes in changes.items():
        row = list(rows[r])
        for c, value in row_changes.items():
            row[c] = value
        rows[r] = tuple(row)
    return tuple(rows)


def paint_cell(
    grid: Grid,
    row: int,
    col: int,
    color_id: int,
    pen_size: int = 1,
    previous_cell: Optional[Cell] = None,
    palette_length: Optional[int] = None,
) -> Grid:
    """Paint one brush sample and return the new grid.

    Args:
        grid: Grid to paint on (left untouched)
        row: Target row
        col: Target column
        color_id: Palette id to paint
        pen_size: Brush side length (1-3)
        previous_cell: Previous sample of the same stroke, if any
        palette_length: Palette size used to validate color_id

    Returns:
        New grid (the same object if nothing changed)

    Raises:
        InvalidPalette: If color_id is negative or beyond the palette
        ValueError: If pen_size is not supported
    """
    if color_id < 0 or (palette_length is not None and color_id >= palette_length):
        raise InvalidPalette(f"Colour id {color_id} is outside the palette")
    return set_cells(grid, stroke_cells(row, col, pen_size, previous_cell), color_id)

