"""
Tests for local persistence of the working pattern and saved projects.
"""

import base64
import io
import json

import pytest
from PIL import Image

from errors import InvalidPalette
from models import GridSize
from project_store import ProjectStore, render_thumbnail

PALETTE = ("#FFFFFF", "#000000", "#FF0000")
GRID = ((0, 1, 2), (2, 1, 0))
SIZE = GridSize(2, 3)


@pytest.fixture
def store(tmp_path) -> ProjectStore:
    return ProjectStore(tmp_path / "data")


# =============================================================================
# Test Working State
# =============================================================================


class TestWorkingState:
    """Tests for the auto-saved pattern."""

    def test_round_trip(self, store: ProjectStore) -> None:
        """Test saving and restoring the working pattern."""
        assert store.save_state(GRID, PALETTE, SIZE) == (True, None)
        assert store.load_state() == (GRID, PALETTE, SIZE)

    def test_file_layout(self, store: ProjectStore) -> None:
        """Test the keys written to state.json."""
        store.save_state(GRID, PALETTE, SIZE)
        data = json.loads(store.state_path.read_text())
        assert data == {
            "grid": [[0, 1, 2], [2, 1, 0]],
            "palette": list(PALETTE),
            "grid_size": {"row": 2, "col": 3},
        }

    def test_missing_state(self, store: ProjectStore) -> None:
        """Test a fresh data directory."""
        assert store.load_state() is None

    def test_corrupt_state(self, store: ProjectStore) -> None:
        """Test that unreadable JSON is ignored."""
        store.data_dir.mkdir(parents=True)
        store.state_path.write_text("{not json")
        assert store.load_state() is None

    def test_inconsistent_state(self, store: ProjectStore) -> None:
        """Test that a grid not matching its size is ignored."""
        store.data_dir.mkdir(parents=True)
        store.state_path.write_text(
            json.dumps({"grid": [[0]], "palette": ["#FFFFFF"], "grid_size": {"row": 2, "col": 2}})
        )
        assert store.load_state() is None


# =============================================================================
# Test Projects
# =============================================================================


class TestProjects:
    """Tests for named project records."""

    def test_save_and_get(self, store: ProjectStore) -> None:
        """Test creating a project."""
        project = store.save_project("  Heart  ", GRID, PALETTE, SIZE)
        assert project.name == "Heart"
        assert project.grid == GRID
        assert project.palette == PALETTE
        assert project.thumbnail.startswith("data:image/png;base64,")
        assert store.get_project(project.id) == project

    def test_blank_name(self, store: ProjectStore) -> None:
        """Test that an empty name falls back to Untitled."""
        assert store.save_project("   ", GRID, PALETTE, SIZE).name == "Untitled"

    def test_overwrite_keeps_id_and_favourite(self, store: ProjectStore) -> None:
        """Test saving over an existing project."""
        project = store.save_project("Heart", GRID, PALETTE, SIZE)
        store.toggle_favorite(project.id)
        updated = store.save_project("Heart v2", ((1, 1, 1), (1, 1, 1)), PALETTE, SIZE, project.id)

        assert updated.id == project.id
        assert updated.is_favorite
        assert len(store.list_projects()) == 1
        assert store.get_project(project.id).name == "Heart v2"

    def test_list_order(self, store: ProjectStore) -> None:
        """Test favourites first, then most recently updated."""
        first = store.save_project("First", GRID, PALETTE, SIZE)
        second = store.save_project("Second", GRID, PALETTE, SIZE)
        third = store.save_project("Third", GRID, PALETTE, SIZE)
        store.toggle_favorite(first.id)

        names = [p.name for p in store.list_projects()]
        assert names[0] == "First"
        assert set(names[1:]) == {second.name, third.name}

    def test_rename(self, store: ProjectStore) -> None:
        """Test renaming, and that a blank rename keeps the old name."""
        project = store.save_project("Heart", GRID, PALETTE, SIZE)
        assert store.rename_project(project.id, "Star").name == "Star"
        assert store.rename_project(project.id, "  ").name == "Star"
        assert store.rename_project("missing", "x") is None

    def test_delete(self, store: ProjectStore) -> None:
        """Test deleting projects."""
        project = store.save_project("Heart", GRID, PALETTE, SIZE)
        assert store.delete_project(project.id) is True
        assert store.delete_project(project.id) is False
        assert store.list_projects() == []

    def test_rejects_inconsistent_project(self, store: ProjectStore) -> None:
        """Test that ids outside the palette are never stored."""
        with pytest.raises(InvalidPalette):
            store.save_project("Bad", ((0, 5, 0), (0, 0, 0)), PALETTE, SIZE)
        assert not store.projects_path.exists()

    def test_skips_unreadable_records(self, store: ProjectStore) -> None:
        """Test that one broken record does not hide the others."""
        good = store.save_project("Heart", GRID, PALETTE, SIZE)
        records = json.loads(store.projects_path.read_text())
        records.append({"id": "broken", "name": "Broken"})
        store.projects_path.write_text(json.dumps(records))

        assert [p.id for p in store.list_projects()] == [good.id]


# =============================================================================
# Test Thumbnails
# =============================================================================


class TestThumbnail:
    """Tests for project thumbnails."""

    def test_thumbnail_is_png(self) -> None:
        """Test that thumbnails decode to a scaled-up copy of the grid."""
        url = render_thumbnail(GRID, PALETTE, max_size=30)
        data = base64.b64decode(url.split(",", 1)[1])
        image = Image.open(io.BytesIO(data))
        assert image.format == "PNG"
        assert image.size == (30, 20)
        assert image.convert("RGB").getpixel((0, 0)) == (255, 255, 255)
        assert image.convert("RGB").getpixel((29, 0)) == (255, 0, 0)
