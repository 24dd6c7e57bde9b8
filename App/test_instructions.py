"""
Tests for row-by-row instruction decoding and the row reader.
"""

import pytest

from models import Direction, Instruction
from pattern.instructions import (
    RowReader,
    decode_row,
    default_direction,
    grid_row_index,
    resolve_direction,
    run_length_encode,
)


def steps(instructions) -> "list[tuple[int, int]]":
    return [(i.color_id, i.count) for i in instructions]


# =============================================================================
# Test Decoding
# =============================================================================


class TestDecodeRow:
    """Tests for run-length decoding of one row."""

    def test_bottom_row_reads_right_to_left(self) -> None:
        """Test [0,0,1,1,1] on row 1 -> 3 of colour 1, then 2 of colour 0."""
        grid = ((2, 2, 2, 2, 2), (0, 0, 1, 1, 1))
        result = decode_row(grid, 1, default_direction(1))
        assert steps(result) == [(1, 3), (0, 2)]

    def test_left_direction_keeps_storage_order(self) -> None:
        """Test that LEFT rows are encoded as stored."""
        grid = ((0, 0, 1, 1, 1),)
        assert steps(decode_row(grid, 1, Direction.LEFT)) == [(0, 2), (1, 3)]

    def test_rows_count_from_bottom(self) -> None:
        """Test that row 2 of a two-row grid is the stored top row."""
        grid = ((3, 4), (0, 0))
        assert steps(decode_row(grid, 2, Direction.LEFT)) == [(3, 1), (4, 1)]
        assert grid_row_index(2, 2) == 0
        assert grid_row_index(2, 1) == 1

    def test_single_colour_row(self) -> None:
        """Test that a uniform row is one instruction."""
        assert steps(decode_row(((5, 5, 5, 5),), 1, Direction.RIGHT)) == [(5, 4)]

    @pytest.mark.parametrize("row", [0, 3])
    def test_row_out_of_range(self, row: int) -> None:
        """Test that rows outside 1..total raise ValueError."""
        with pytest.raises(ValueError):
            decode_row(((0,), (0,)), row, Direction.RIGHT)

    def test_empty_sequence(self) -> None:
        """Test that nothing to encode gives no instructions."""
        assert run_length_encode([]) == []

    def test_run_length_encode(self) -> None:
        """Test alternating runs."""
        assert run_length_encode([1, 1, 0, 1]) == [
            Instruction(1, 2),
            Instruction(0, 1),
            Instruction(1, 1),
        ]


# =============================================================================
# Test Directions
# =============================================================================


class TestDirections:
    """Tests for the alternating default and sparse overrides."""

    def test_default_alternates_from_bottom(self) -> None:
        """Test odd rows RIGHT, even rows LEFT."""
        assert [default_direction(r) for r in range(1, 5)] == [
            Direction.RIGHT,
            Direction.LEFT,
            Direction.RIGHT,
            Direction.LEFT,
        ]

    def test_override_wins(self) -> None:
        """Test that an explicit override replaces the default."""
        assert resolve_direction(1, {1: Direction.LEFT}) is Direction.LEFT
        assert resolve_direction(2, {1: Direction.LEFT}) is Direction.LEFT

    def test_toggle_row_three_only(self) -> None:
        """Test that toggling row 3 leaves rows 1, 2 and 4 alone."""
        reader = RowReader(((0,),) * 5)
        reader.go_to_row(3)
        assert reader.toggle_direction() is Direction.LEFT

        assert reader.direction(3) is Direction.LEFT
        assert reader.direction(1) is Direction.RIGHT
        assert reader.direction(2) is Direction.LEFT
        assert reader.direction(4) is Direction.LEFT
        assert reader.overrides == {3: Direction.LEFT}

    def test_toggle_twice_removes_override(self) -> None:
        """Test that flipping back to the default stores nothing."""
        reader = RowReader(((0,),) * 3)
        reader.toggle_direction(2)
        reader.toggle_direction(2)
        assert reader.overrides == {}
        assert reader.direction(2) is Direction.LEFT


# =============================================================================
# Test Row Reader
# =============================================================================


class TestRowReader:
    """Tests for navigation, checkmarks and rotation."""

    def test_navigation_is_clamped(self) -> None:
        """Test that moving past either end stays in range."""
        reader = RowReader(((0,),) * 3)
        assert reader.previous_row() == 1
        assert reader.go_to_row(10) == 3
        assert reader.next_row() == 3
        assert reader.go_to_row(2) == 2

    def test_checkmarks_keyed_by_row(self) -> None:
        """Test that a checkmark belongs to one row and one index."""
        reader = RowReader(((0, 1),) * 3)
        assert reader.toggle_checked(0) is True
        assert reader.is_checked(0)
        assert not reader.is_checked(1)

        reader.next_row()
        assert not reader.is_checked(0)
        assert reader.is_checked(0, row=1)

        assert reader.toggle_checked(0, row=1) is False
        assert not reader.is_checked(0, row=1)

    def test_worked_rows(self) -> None:
        """Test that rows below the current one count as worked."""
        reader = RowReader(((0,),) * 4)
        reader.go_to_row(3)
        assert reader.is_worked(1)
        assert reader.is_worked(2)
        assert not reader.is_worked(3)
        assert not reader.is_worked(4)

    def test_worked_grid_rows(self) -> None:
        """Test that worked rows map to the bottom storage indices."""
        reader = RowReader(((0,),) * 4)
        assert reader.worked_grid_rows() == []
        reader.go_to_row(3)
        # Rows 1 and 2 from the bottom are stored at indices 3 and 2
        assert reader.worked_grid_rows() == [3, 2]

    def test_reading_snapshot(self) -> None:
        """Test the data handed to the view."""
        reader = RowReader(((1, 1, 0), (0, 0, 1)))
        reading = reader.reading()
        assert reading.row == 1
        assert reading.direction is Direction.RIGHT
        assert reading.grid_row_index == 1
        assert steps(reading.instructions) == [(1, 1), (0, 2)]

    def test_rotate_resets_state(self) -> None:
        """Test rotation of [[a,b,c],[d,e,f]] and the reset that follows."""
        a, b, c, d, e, f = 1, 2, 3, 4, 5, 6
        reader = RowReader(((a, b, c), (d, e, f)))
        reader.go_to_row(2)
        reader.toggle_direction()
        reader.toggle_checked(0)

        rotated = reader.rotate()

        assert rotated == ((d, a), (e, b), (f, c))
        assert reader.grid == rotated
        assert reader.current_row == 1
        assert reader.overrides == {}
        assert reader.checked == {}

    def test_set_grid_keeps_row_when_possible(self) -> None:
        """Test that editing the grid keeps the reading position."""
        reader = RowReader(((0,),) * 5)
        reader.go_to_row(4)
        reader.set_grid(((1,),) * 5)
        assert reader.current_row == 4
        reader.set_grid(((1,),) * 2)
        assert reader.current_row == 2
