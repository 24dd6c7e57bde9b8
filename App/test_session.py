"""
Tests for PatternSession, the editor's single owner of pattern state.
"""

import pytest

from errors import InvalidGridSize, InvalidPalette
from models import DEFAULT_PALETTE, NEW_COLOR, GridSize
from pattern import PatternSession


@pytest.fixture
def session() -> PatternSession:
    return PatternSession(GridSize(10, 10), DEFAULT_PALETTE)


# =============================================================================
# Test Strokes
# =============================================================================


class TestStrokes:
    """Tests for painting through begin/continue/end stroke."""

    def test_defaults(self, session: PatternSession) -> None:
        """Test the starting state."""
        assert session.brush.active_color_id == 1
        assert len(session.history) == 1
        assert not session.history.can_undo

    def test_stroke_is_one_history_entry(self, session: PatternSession) -> None:
        """Test that a long drag commits exactly one entry at the end."""
        session.begin_stroke(0, 0)
        for col in range(1, 10):
            session.continue_stroke(0, col)
        assert len(session.history) == 1

        assert session.end_stroke() is True
        assert len(session.history) == 2
        assert session.grid[0] == (1,) * 10

    def test_stroke_interpolates_between_samples(self, session: PatternSession) -> None:
        """Test that jumps between samples leave no gaps."""
        session.begin_stroke(9, 0)
        session.continue_stroke(9, 9)
        session.end_stroke()
        assert session.grid[9] == (1,) * 10

    def test_stroke_without_change_is_not_recorded(self, session: PatternSession) -> None:
        """Test painting colour 0 over a blank grid."""
        session.select_color(0)
        session.begin_stroke(3, 3)
        assert session.end_stroke() is False
        assert len(session.history) == 1

    def test_end_clears_previous_cell(self, session: PatternSession) -> None:
        """Test that two strokes are not joined together."""
        session.begin_stroke(0, 0)
        session.end_stroke()
        assert session.brush.last_painted_cell is None
        session.begin_stroke(0, 9)
        session.end_stroke()
        assert session.grid[0] == (1,) + (0,) * 8 + (1,)

    def test_pen_size(self, session: PatternSession) -> None:
        """Test painting with a wider brush."""
        session.set_pen_size(3)
        session.begin_stroke(5, 5)
        session.end_stroke()
        assert sum(cell for row in session.grid for cell in row) == 9
        with pytest.raises(ValueError):
            session.set_pen_size(5)

    def test_select_color_out_of_range(self, session: PatternSession) -> None:
        """Test selecting an id the palette does not have."""
        with pytest.raises(InvalidPalette):
            session.select_color(len(DEFAULT_PALETTE))


# =============================================================================
# Test Whole-Grid Actions
# =============================================================================


class TestGridActions:
    """Tests for clear, resize, rotate, conversion and undo/redo."""

    def test_undo_redo_stroke(self, session: PatternSession) -> None:
        """Test undoing and redoing a stroke."""
        session.begin_stroke(2, 2)
        session.end_stroke()
        painted = session.grid

        session.undo()
        assert session.grid[2][2] == 0
        session.redo()
        assert session.grid == painted
        assert session.redo() is None

    def test_clear(self, session: PatternSession) -> None:
        """Test that clearing is undoable."""
        session.begin_stroke(2, 2)
        session.end_stroke()
        session.clear()
        assert session.grid[2][2] == 0
        session.undo()
        assert session.grid[2][2] == 1

    def test_resize(self, session: PatternSession) -> None:
        """Test starting a blank grid of another size."""
        session.reader.go_to_row(5)
        session.resize(GridSize(4, 6))
        assert session.size == GridSize(4, 6)
        assert len(session.grid) == 4 and len(session.grid[0]) == 6
        assert session.reader.current_row == 1

        session.undo()
        assert session.size == GridSize(10, 10)
        assert session.reader.total_rows == 10

    def test_resize_invalid(self, session: PatternSession) -> None:
        """Test that a zero-area resize leaves the session alone."""
        with pytest.raises(InvalidGridSize):
            session.resize(GridSize(0, 3))
        assert session.size == GridSize(10, 10)

    def test_rotate(self) -> None:
        """Test rotation updates size, history and the reader."""
        session = PatternSession(GridSize(2, 3), DEFAULT_PALETTE)
        session.apply_grid(((1, 2, 3), (4, 0, 1)))
        session.reader.toggle_direction()

        session.rotate()
        assert session.size == GridSize(3, 2)
        assert session.grid == ((4, 1), (0, 2), (1, 3))
        assert session.reader.overrides == {}

        session.undo()
        assert session.size == GridSize(2, 3)
        assert session.grid == ((1, 2, 3), (4, 0, 1))

    def test_undo_rotation_of_square_grid_resets_reader(self) -> None:
        """Test that undoing a rotation drops marks made on the rotated rows."""
        session = PatternSession(GridSize(3, 3), DEFAULT_PALETTE)
        session.begin_stroke(0, 0)
        session.end_stroke()
        session.rotate()
        session.reader.toggle_checked(0)
        session.reader.go_to_row(3)

        session.undo()
        assert session.grid[0][0] == 1
        assert session.reader.current_row == 1
        assert session.reader.checked == {}

    def test_redo_rotation_of_square_grid_resets_reader(self) -> None:
        """Test that redoing a rotation restarts the reader at row 1."""
        session = PatternSession(GridSize(3, 3), DEFAULT_PALETTE)
        session.begin_stroke(0, 0)
        session.end_stroke()
        session.rotate()
        session.undo()
        session.reader.toggle_direction()
        session.reader.toggle_checked(0)
        session.reader.go_to_row(2)

        session.redo()
        assert session.grid[0][2] == 1
        assert session.reader.current_row == 1
        assert session.reader.overrides == {}
        assert session.reader.checked == {}

    def test_undo_stroke_keeps_reader_place(self, session: PatternSession) -> None:
        """Test that undoing a paint stroke leaves the row reader where it was."""
        session.reader.go_to_row(4)
        session.reader.toggle_checked(0)
        session.begin_stroke(2, 2)
        session.end_stroke()

        session.undo()
        assert session.reader.current_row == 4
        assert session.reader.checked == {(4, 0): True}

    def test_apply_grid_validates(self, session: PatternSession) -> None:
        """Test that converted grids must match the size and palette."""
        with pytest.raises(InvalidGridSize):
            session.apply_grid(((0,),))
        with pytest.raises(InvalidPalette):
            session.apply_grid(((99,) * 10,) * 10)
        assert len(session.history) == 1

    def test_load_resets_history(self, session: PatternSession) -> None:
        """Test opening saved work."""
        session.begin_stroke(0, 0)
        session.end_stroke()
        session.load(((0, 1), (1, 0)), ["#FFFFFF", "#000000"], GridSize(2, 2))
        assert session.size == GridSize(2, 2)
        assert session.palette == ("#FFFFFF", "#000000")
        assert len(session.history) == 1
        assert session.reader.current_row == 1


# =============================================================================
# Test Palette Edits
# =============================================================================


class TestPaletteEdits:
    """Tests for palette changes through the session."""

    def test_add_color_selects_it(self, session: PatternSession) -> None:
        """Test that a new colour becomes the brush colour."""
        color_id = session.add_color()
        assert color_id == len(DEFAULT_PALETTE)
        assert session.palette[color_id] == NEW_COLOR
        assert session.brush.active_color_id == color_id

    def test_update_color_keeps_grid(self, session: PatternSession) -> None:
        """Test that recolouring changes the palette only."""
        session.begin_stroke(0, 0)
        session.end_stroke()
        grid = session.grid
        session.update_color(1, "#ABCDEF")
        assert session.palette[1] == "#ABCDEF"
        assert session.grid is grid

    def test_update_color_rejects_bad_hex(self, session: PatternSession) -> None:
        """Test malformed colours."""
        with pytest.raises(InvalidPalette):
            session.update_color(1, "not a colour")
