"""
Tests for the bounded undo/redo history.
"""

import pytest

from models import GridSize
from pattern.grid import make_grid
from pattern.history import HistoryStack

SIZE = GridSize(2, 2)


def grid_of(value: int):
    return make_grid(SIZE, fill=value)


class TestHistoryStack:
    """Tests for push/undo/redo semantics."""

    def test_empty_stack(self) -> None:
        """Test a stack with nothing pushed."""
        history = HistoryStack()
        assert len(history) == 0
        assert history.current is None
        assert not history.can_undo
        assert not history.can_redo
        assert history.undo() is None
        assert history.redo() is None

    def test_overflow_evicts_oldest(self) -> None:
        """Test that 51 pushes keep 50 entries and drop the first."""
        history = HistoryStack()
        for value in range(51):
            history.push(grid_of(value), SIZE)

        assert len(history) == 50
        assert history.can_undo
        assert history.index == 49

        seen = [history.current.grid[0][0]]
        while history.can_undo:
            seen.append(history.undo().grid[0][0])
        assert 0 not in seen
        assert seen[-1] == 1
        assert history.undo() is None

    def test_push_after_undo_discards_redo(self) -> None:
        """Test that push, push, undo, push leaves three entries."""
        history = HistoryStack()
        history.reset(grid_of(0), SIZE)
        history.push(grid_of(1), SIZE)
        history.push(grid_of(2), SIZE)
        history.undo()
        history.push(grid_of(3), SIZE)

        assert len(history) == 3
        assert not history.can_redo
        assert history.redo() is None
        assert history.current.grid == grid_of(3)
        assert history.undo().grid == grid_of(1)

    def test_undo_redo_walk(self) -> None:
        """Test stepping back and forward returns the matching entries."""
        history = HistoryStack()
        history.push(grid_of(0), SIZE)
        history.push(grid_of(1), GridSize(1, 1))

        entry = history.undo()
        assert entry.grid == grid_of(0)
        assert entry.size == SIZE
        assert history.can_redo

        entry = history.redo()
        assert entry.size == GridSize(1, 1)
        assert not history.can_redo

    def test_snapshots_are_independent(self) -> None:
        """Test that later edits to a pushed list grid do not leak in."""
        history = HistoryStack()
        grid = [[0, 0], [0, 0]]
        history.push(grid, SIZE)
        grid[0][0] = 7
        assert history.current.grid == ((0, 0), (0, 0))

    def test_reset(self) -> None:
        """Test that reset leaves a single entry."""
        history = HistoryStack()
        for value in range(5):
            history.push(grid_of(value), SIZE)
        history.reset(grid_of(9), SIZE)
        assert len(history) == 1
        assert history.index == 0
        assert not history.can_undo

    def test_custom_limit(self) -> None:
        """Test a smaller bound."""
        history = HistoryStack(limit=3)
        for value in range(10):
            history.push(grid_of(value), SIZE)
        assert len(history) == 3

    def test_invalid_limit(self) -> None:
        """Test that a non-positive bound is rejected."""
        with pytest.raises(ValueError):
            HistoryStack(limit=0)
