"""Bounded linear undo/redo history."""

from typing import List, Optional, Sequence

from models import HISTORY_LIMIT, GridSize, HistoryEntry

from .grid import freeze_grid


class HistoryStack:
    """Linear undo log of (grid, size) snapshots.

    The entry at `index` always mirrors what the editor shows. Pushing after
    an undo discards the redo branch; past `limit` entries the oldest one is
    evicted. Undo and redo past either end are silent no-ops.
    """

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._entries: List[HistoryEntry] = []
        self._index = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def current(self) -> Optional[HistoryEntry]:
        if self._index < 0:
            return None
        return self._entries[self._index]

    def push(
        self, grid: "Sequence[Sequence[int]]", size: GridSize, layout_id: int = 0
    ) -> HistoryEntry:
        """Record a snapshot after a discrete user action."""
        # AIDEV-NOTE: freeze_grid copies list grids; GridSize is frozen already
        entry = HistoryEntry(
            grid=freeze_grid(grid), size=GridSize(size.row, size.col), layout_id=layout_id
        )

        del self._entries[self._index + 1 :]
        self._entries.append(entry)

        if len(self._entries) > self.limit:
            del self._entries[: len(self._entries) - self.limit]

        self._index = len(self._entries) - 1
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        """Step back one entry, or return None if there is nothing to undo."""
        if not self.can_undo:
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[HistoryEntry]:
        """Step forward one entry, or return None if there is nothing to redo."""
        if not self.can_redo:
            return None
        self._index += 1
        return self._entries[self._index]

    def reset(
        self, grid: "Sequence[Sequence[int]]", size: GridSize, layout_id: int = 0
    ) -> HistoryEntry:
        """Forget everything and start over from a single snapshot."""
        self._entries.clear()
        self._index = -1
        return self.push(grid, size, layout_id)
