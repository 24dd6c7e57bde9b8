"""
Tests for grid construction, validation and rotation.
"""

import pytest

from errors import InvalidGridSize, InvalidPalette, PatternError
from models import GridSize
from pattern.grid import (
    clear_grid,
    freeze_grid,
    grid_from_data,
    grid_size,
    grid_to_data,
    make_grid,
    rotate_clockwise,
    validate_grid,
)


# =============================================================================
# Test Grid Construction
# =============================================================================


class TestMakeGrid:
    """Tests for make_grid."""

    @pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (90, 73), (5, 1)])
    def test_rows_of_zeros(self, rows: int, cols: int) -> None:
        """Test that every row holds exactly `cols` zeros."""
        grid = make_grid(GridSize(rows, cols))
        assert len(grid) == rows
        assert all(row == (0,) * cols for row in grid)

    def test_fill_value(self) -> None:
        """Test filling with a non-zero colour id."""
        grid = make_grid(GridSize(2, 2), fill=3)
        assert grid == ((3, 3), (3, 3))

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3)])
    def test_rejects_empty_size(self, rows: int, cols: int) -> None:
        """Test that zero-area sizes raise InvalidGridSize."""
        with pytest.raises(InvalidGridSize):
            make_grid(GridSize(rows, cols))

    def test_errors_are_value_errors(self) -> None:
        """Test the error hierarchy callers rely on."""
        with pytest.raises(ValueError):
            make_grid(GridSize(0, 0))
        assert issubclass(InvalidGridSize, PatternError)

    def test_clear_keeps_size(self) -> None:
        """Test that clearing returns a blank grid of the same size."""
        grid = ((1, 2, 3), (4, 5, 6))
        assert clear_grid(grid) == ((0, 0, 0), (0, 0, 0))


# =============================================================================
# Test Validation
# =============================================================================


class TestValidateGrid:
    """Tests for validate_grid and grid_size."""

    def test_valid_grid_passes(self) -> None:
        """Test that a matching grid raises nothing."""
        validate_grid(((0, 1), (2, 0)), GridSize(2, 2), palette_length=3)

    def test_wrong_row_count(self) -> None:
        """Test a grid with too few rows."""
        with pytest.raises(InvalidGridSize):
            validate_grid(((0, 0),), GridSize(2, 2))

    def test_ragged_row(self) -> None:
        """Test a grid whose rows differ in length."""
        with pytest.raises(InvalidGridSize):
            validate_grid(((0, 0), (0,)), GridSize(2, 2))

    def test_id_beyond_palette(self) -> None:
        """Test an id that the palette cannot resolve."""
        with pytest.raises(InvalidPalette):
            validate_grid(((0, 5),), GridSize(1, 2), palette_length=5)

    def test_negative_id(self) -> None:
        """Test that negative ids are rejected even without a palette."""
        with pytest.raises(InvalidPalette):
            validate_grid(((0, -1),), GridSize(1, 2))

    def test_grid_size_of_empty_grid(self) -> None:
        """Test that an empty grid has no size."""
        with pytest.raises(InvalidGridSize):
            grid_size(())


# =============================================================================
# Test Rotation
# =============================================================================


class TestRotateClockwise:
    """Tests for the 90 degree clockwise rotation."""

    def test_two_by_three(self) -> None:
        """Test [[a,b,c],[d,e,f]] -> [[d,a],[e,b],[f,c]]."""
        a, b, c, d, e, f = 1, 2, 3, 4, 5, 6
        rotated = rotate_clockwise(((a, b, c), (d, e, f)))
        assert rotated == ((d, a), (e, b), (f, c))

    def test_swaps_dimensions(self) -> None:
        """Test that an R x C grid becomes C x R."""
        rotated = rotate_clockwise(make_grid(GridSize(4, 7)))
        assert grid_size(rotated) == GridSize(7, 4)

    def test_four_turns_is_identity(self) -> None:
        """Test that rotating four times gives the original grid back."""
        grid = ((1, 2, 3), (4, 5, 6))
        rotated = grid
        for _ in range(4):
            rotated = rotate_clockwise(rotated)
        assert rotated == grid

    def test_input_not_modified(self) -> None:
        """Test that rotation leaves list input untouched."""
        grid = [[1, 2], [3, 4]]
        rotate_clockwise(grid)
        assert grid == [[1, 2], [3, 4]]


# =============================================================================
# Test Storage Round Trip
# =============================================================================


class TestGridData:
    """Tests for converting grids to and from JSON-friendly data."""

    def test_to_data_gives_lists(self) -> None:
        """Test that stored grids are plain nested lists."""
        assert grid_to_data(((1, 2), (3, 4))) == [[1, 2], [3, 4]]

    def test_from_data_freezes(self) -> None:
        """Test that loaded grids are immutable tuples."""
        grid = grid_from_data([[1, 2], [3, 4]], GridSize(2, 2))
        assert grid == ((1, 2), (3, 4))
        assert isinstance(grid[0], tuple)

    def test_from_data_size_mismatch(self) -> None:
        """Test that a grid not matching its stored size is rejected."""
        with pytest.raises(InvalidGridSize):
            grid_from_data([[1, 2], [3, 4]], GridSize(3, 2))

    @pytest.mark.parametrize("data", [None, [["x"]], [[1, 2], [3]], []])
    def test_from_data_malformed(self, data) -> None:
        """Test that malformed stored data raises InvalidGridSize."""
        with pytest.raises(InvalidGridSize):
            grid_from_data(data)

    def test_freeze_copies_lists(self) -> None:
        """Test that freezing detaches the grid from its source lists."""
        source = [[0, 0]]
        frozen = freeze_grid(source)
        source[0][0] = 9
        assert frozen == ((0, 0),)
