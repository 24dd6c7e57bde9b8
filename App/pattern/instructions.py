"""Row-by-row stitch instructions for reading a finished pattern.

AIDEV-NOTE: Rows are numbered from the bottom of the piece (row 1 is the
last stored row) because that is the order they are worked in. Odd rows
read right-to-left and even rows left-to-right unless the user overrides a
row; overrides are stored sparsely so memory follows the number of edits,
not the number of rows.
"""

from typing import Dict, Mapping, Sequence, Tuple

from models import Direction, Instruction, RowReading

from .grid import Grid, grid_size, rotate_clockwise


def default_direction(row: int) -> Direction:
    """Boustrophedon default: odd rows RIGHT, even rows LEFT."""
    return Direction.RIGHT if row % 2 == 1 else Direction.LEFT


def resolve_direction(row: int, overrides: Mapping[int, Direction]) -> Direction:
    return overrides.get(row, default_direction(row))


def grid_row_index(total_rows: int, row: int) -> int:
    """Storage index (top = 0) of a row numbered from the bottom."""
    return total_rows - row


def run_length_encode(cells: Sequence[int]) -> "list[Instruction]":
    """Collapse runs of equal ids into instructions, in scan order."""
    instructions: "list[Instruction]" = []
    run_id = None
    run_length = 0
    for cell in cells:
        if run_length and cell == run_id:
            run_length += 1
            continue
        if run_length:
            instructions.append(Instruction(color_id=run_id, count=run_length))
        run_id = cell
        run_length = 1
    if run_length:
        instructions.append(Instruction(color_id=run_id, count=run_length))
    return instructions


def decode_row(
    grid: "Sequence[Sequence[int]]", row: int, direction: Direction
) -> "list[Instruction]":
    """Instructions for `row` (1 = bottom) read in `direction`.

    RIGHT rows are reversed before encoding so the list is in working order.

    Raises:
        ValueError: If row is not between 1 and the number of rows
    """
    total_rows = len(grid)
    if not 1 <= row <= total_rows:
        raise ValueError(f"Row {row} is outside 1..{total_rows}")

    cells = list(grid[grid_row_index(total_rows, row)])
    if direction is Direction.RIGHT:
        cells.reverse()
    return run_length_encode(cells)


class RowReader:
    """Reading position, direction overrides and checkmarks for one grid.

    AIDEV-NOTE: Overrides and checkmarks are keyed by row number, which a
    rotation invalidates, so rotate() clears both and restarts at row 1.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.current_row = 1
        self.overrides: Dict[int, Direction] = {}
        self.checked: Dict[Tuple[int, int], bool] = {}

    @property
    def total_rows(self) -> int:
        return len(self.grid)

    def set_grid(self, grid: Grid) -> None:
        """Follow an edited grid, keeping the position when it still fits."""
        self.grid = grid
        self.current_row = max(1, min(self.current_row, self.total_rows))

    def direction(self, row: "int | None" = None) -> Direction:
        return resolve_direction(self.current_row if row is None else row, self.overrides)

    def go_to_row(self, row: int) -> int:
        """Jump to `row`, clamped to the grid."""
        self.current_row = max(1, min(int(row), self.total_rows))
        return self.current_row

    def next_row(self) -> int:
        return self.go_to_row(self.current_row + 1)

    def previous_row(self) -> int:
        return self.go_to_row(self.current_row - 1)

    def toggle_direction(self, row: "int | None" = None) -> Direction:
        """Flip one row's direction without touching any other row."""
        row = self.current_row if row is None else row
        flipped = self.direction(row).flipped()
        if flipped is default_direction(row):
            self.overrides.pop(row, None)
        else:
            self.overrides[row] = flipped
        return flipped

    def is_checked(self, index: int, row: "int | None" = None) -> bool:
        row = self.current_row if row is None else row
        return self.checked.get((row, index), False)

    def toggle_checked(self, index: int, row: "int | None" = None) -> bool:
        """Flip the completed mark of one instruction."""
        key = (self.current_row if row is None else row, index)
        self.checked[key] = not self.checked.get(key, False)
        return self.checked[key]

    def is_worked(self, row: int) -> bool:
        """True for rows already finished (below the current row)."""
        return row < self.current_row

    def worked_grid_rows(self) -> "list[int]":
        """Storage indices of every worked row, for shading in the view."""
        total = self.total_rows
        return [grid_row_index(total, row) for row in range(1, total + 1) if self.is_worked(row)]

    def reset(self, grid: Grid) -> None:
        """Start reading a different grid from row 1."""
        self.grid = grid
        self.current_row = 1
        self.overrides.clear()
        self.checked.clear()

    def rotate(self) -> Grid:
        """Rotate the grid clockwise and reset row-keyed state."""
        self.reset(rotate_clockwise(self.grid))
        return self.grid

    def reading(self) -> RowReading:
        """Snapshot of the current row for the view."""
        size = grid_size(self.grid)
        direction = self.direction()
        return RowReading(
            row=self.current_row,
            direction=direction,
            instructions=tuple(decode_row(self.grid, self.current_row, direction)),
            grid_row_index=grid_row_index(size.row, self.current_row),
        )
