"""Local persistence for the working pattern and named projects.

AIDEV-NOTE: Two JSON files live in the data directory:
- state.json: the auto-saved grid/palette/grid_size restored at start-up
- projects.json: the list of saved Project records
Writes are whole-file snapshots, so the last write always wins.
"""

import base64
import io
import json
import time
import uuid
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PIL import Image

from models import GridSize, Project
from pattern.grid import Grid, freeze_grid, grid_from_data, grid_to_data, validate_grid
from pattern.palette import make_palette, palette_rgb

STATE_FILE = "state.json"
PROJECTS_FILE = "projects.json"
THUMBNAIL_SIZE = 96  # pixels, longest side


def render_thumbnail(grid: Grid, palette: "Sequence[str]", max_size: int = THUMBNAIL_SIZE) -> str:
    """Render a grid as a small PNG data URL."""
    size = GridSize(row=len(grid), col=len(grid[0]))
    colors = palette_rgb(palette)

    image = Image.new("RGB", (size.col, size.row))
    image.putdata([colors[cell] for row in grid for cell in row])

    # Whole-cell scaling keeps the pixel look
    factor = max(1, max_size // max(size.row, size.col))
    if factor > 1:
        image = image.resize((size.col * factor, size.row * factor), Image.Resampling.NEAREST)
    else:
        image.thumbnail((max_size, max_size), Image.Resampling.NEAREST)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


def project_to_dict(project: Project) -> dict:
    return {
        "id": project.id,
        "name": project.name,
        "grid": grid_to_data(project.grid),
        "size": project.size.to_dict(),
        "palette": list(project.palette),
        "updated_at": project.updated_at,
        "thumbnail": project.thumbnail,
        "is_favorite": project.is_favorite,
    }


def project_from_dict(data: dict) -> Project:
    """Rebuild a Project, validating its pattern data.

    Raises:
        PatternError: If the grid, size or palette are inconsistent
        KeyError: If a required field is missing
    """
    size = GridSize.from_dict(data["size"])
    palette = make_palette(data["palette"])
    grid = grid_from_data(data["grid"], size)
    validate_grid(grid, size, len(palette))
    return Project(
        id=str(data["id"]),
        name=str(data["name"]),
        grid=grid,
        size=size,
        palette=palette,
        updated_at=float(data.get("updated_at", 0.0)),
        thumbnail=data.get("thumbnail"),
        is_favorite=bool(data.get("is_favorite", False)),
    )


class ProjectStore:
    """Reads and writes pattern data under a data directory."""

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    @property
    def state_path(self) -> Path:
        return self.data_dir / STATE_FILE

    @property
    def projects_path(self) -> Path:
        return self.data_dir / PROJECTS_FILE

    # === Working state ===

    def save_state(self, grid: Grid, palette: "Sequence[str]", size: GridSize) -> Tuple[bool, Optional[str]]:
        """Auto-save the pattern currently being edited.

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = {
            "grid": grid_to_data(grid),
            "palette": list(palette),
            "grid_size": size.to_dict(),
        }
        return self._write_json(self.state_path, data)

    def load_state(self) -> "Optional[tuple[Grid, tuple[str, ...], GridSize]]":
        """Restore the auto-saved pattern, or None if missing or unusable."""
        data = self._read_json(self.state_path)
        if data is None:
            return None
        try:
            size = GridSize.from_dict(data["grid_size"])
            palette = make_palette(data["palette"])
            grid = grid_from_data(data["grid"], size)
            validate_grid(grid, size, len(palette))
        except (ValueError, KeyError, TypeError) as e:
            print(f"Warning: Ignoring saved state: {e}")
            return None
        print(f"✓ Restored {size.row}x{size.col} pattern from {self.state_path}")
        return grid, palette, size

    # === Projects ===

    def list_projects(self) -> List[Project]:
        """All saved projects, favourites first, then most recently updated."""
        projects = self._load_projects()
        return sorted(projects, key=lambda p: (not p.is_favorite, -p.updated_at))

    def get_project(self, project_id: str) -> Optional[Project]:
        for project in self._load_projects():
            if project.id == project_id:
                return project
        return None

    def save_project(
        self,
        name: str,
        grid: "Sequence[Sequence[int]]",
        palette: "Sequence[str]",
        size: GridSize,
        project_id: Optional[str] = None,
    ) -> Project:
        """Create a project, or overwrite the one with `project_id`.

        Raises:
            PatternError: If the pattern data is inconsistent
            OSError: If the projects file cannot be written
        """
        frozen = freeze_grid(grid)
        checked_palette = make_palette(palette)
        validate_grid(frozen, size, len(checked_palette))

        projects = self._load_projects()
        existing = next((p for p in projects if p.id == project_id), None)

        project = Project(
            id=existing.id if existing else uuid.uuid4().hex,
            name=name.strip() or "Untitled",
            grid=frozen,
            size=size,
            palette=checked_palette,
            updated_at=time.time(),
            thumbnail=render_thumbnail(frozen, checked_palette),
            is_favorite=existing.is_favorite if existing else False,
        )

        if existing:
            projects = [project if p.id == existing.id else p for p in projects]
        else:
            projects.append(project)

        self._save_projects(projects)
        print(f"✓ Saved project '{project.name}'")
        return project

    def rename_project(self, project_id: str, name: str) -> Optional[Project]:
        return self._update(project_id, lambda p: replace(p, name=name.strip() or p.name))

    def toggle_favorite(self, project_id: str) -> Optional[Project]:
        return self._update(project_id, lambda p: replace(p, is_favorite=not p.is_favorite))

    def delete_project(self, project_id: str) -> bool:
        projects = self._load_projects()
        remaining = [p for p in projects if p.id != project_id]
        if len(remaining) == len(projects):
            return False
        self._save_projects(remaining)
        return True

    # === Internal ===

    def _update(self, project_id: str, change) -> Optional[Project]:
        projects = self._load_projects()
        updated = None
        for i, project in enumerate(projects):
            if project.id == project_id:
                updated = change(project)
                projects[i] = updated
        if updated is not None:
            self._save_projects(projects)
        return updated

    def _load_projects(self) -> List[Project]:
        data = self._read_json(self.projects_path)
        if not isinstance(data, list):
            return []

        projects = []
        for entry in data:
            try:
                projects.append(project_from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                print(f"Warning: Skipping unreadable project: {e}")
        return projects

    def _save_projects(self, projects: List[Project]) -> None:
        success, error = self._write_json(
            self.projects_path, [project_to_dict(p) for p in projects]
        )
        if not success:
            raise OSError(f"Could not save projects: {error}")

    def _read_json(self, path: Path):
        if not path.exists():
            return None
        try:
            with open(path, "r") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            print(f"Warning: Could not read {path}: {e}")
            return None

    def _write_json(self, path: Path, data) -> Tuple[bool, Optional[str]]:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(data, f)
            return True, None
        except (OSError, TypeError) as e:
            return False, str(e)
