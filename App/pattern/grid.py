"""Grid construction, validation and structural transforms.

AIDEV-NOTE: A grid is a tuple of row tuples. Every operation returns a new
grid and reuses the row tuples it did not change, so history snapshots can
hold grids directly without deep copies.
"""

from typing import Iterable, Sequence, Tuple

from errors import InvalidGridSize, InvalidPalette
from models import GridSize

Grid = Tuple[Tuple[int, ...], ...]


def validate_size(size: GridSize) -> None:
    """Raise InvalidGridSize unless both dimensions are positive integers."""
    if not isinstance(size.row, int) or not isinstance(size.col, int):
        raise InvalidGridSize(f"Grid size must be integers, got {size}")
    if size.row < 1 or size.col < 1:
        raise InvalidGridSize(
            f"Grid size must be at least 1x1, got {size.row}x{size.col}"
        )


def make_grid(size: GridSize, fill: int = 0) -> Grid:
    """Create a grid of `size` filled with colour id `fill`."""
    validate_size(size)
    row = (fill,) * size.col
    # Rows are immutable, so every row can be the same tuple
    return (row,) * size.row


def freeze_grid(grid: Iterable[Iterable[int]]) -> Grid:
    """Copy any nested sequence of ids into an immutable grid."""
    return tuple(tuple(int(cell) for cell in row) for row in grid)


def grid_size(grid: "Sequence[Sequence[int]]") -> GridSize:
    """Size of a non-empty rectangular grid."""
    if not grid or not grid[0]:
        raise InvalidGridSize("Grid has no cells")
    return GridSize(row=len(grid), col=len(grid[0]))


def validate_grid(
    grid: "Sequence[Sequence[int]]",
    size: GridSize,
    palette_length: "int | None" = None,
) -> None:
    """Check that `grid` has exactly `size` cells and valid colour ids.

    Raises:
        InvalidGridSize: If the row count or any row length is wrong
        InvalidPalette: If an id is negative or beyond the palette
    """
    validate_size(size)
    if len(grid) != size.row:
        raise InvalidGridSize(f"Expected {size.row} rows, got {len(grid)}")
    for index, row in enumerate(grid):
        if len(row) != size.col:
            raise InvalidGridSize(
                f"Row {index} has {len(row)} cells, expected {size.col}"
            )
        for cell in row:
            if cell < 0 or (palette_length is not None and cell >= palette_length):
                raise InvalidPalette(
                    f"Colour id {cell} in row {index} is outside the palette"
                )


def clear_grid(grid: "Sequence[Sequence[int]]") -> Grid:
    """Blank grid with the same size as `grid`."""
    return make_grid(grid_size(grid))


def rotate_clockwise(
    grid: "Sequence[Sequence[int]]",
) -> Grid:
    """Rotate a grid 90 degrees clockwise.

    Cell (r, c) moves to (c, rows - 1 - r), so an R x C grid becomes C x R.
    """
    size = grid_size(grid)
    return tuple(
        tuple(grid[size.row - 1 - r][c] for r in range(size.row))
        for c in range(size.col)
    )


def grid_to_data(grid: "Sequence[Sequence[int]]") -> "list[list[int]]":
    """Plain nested lists for JSON storage."""
    return [list(row) for row in grid]


def grid_from_data(data, size: "GridSize | None" = None) -> Grid:
    """Rebuild a grid from stored nested lists.

    Raises:
        InvalidGridSize: If the data is not a non-empty rectangle of ints
            (or does not match `size` when given)
    """
    try:
        grid = freeze_grid(data)
    except (TypeError, ValueError) as e:
        raise InvalidGridSize(f"Stored grid is not a list of rows: {e}") from e

    validate_grid(grid, size or grid_size(grid))
    return grid
