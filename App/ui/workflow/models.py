"""Data models for the workflow widget."""

from enum import IntEnum


class WorkflowStep(IntEnum):
    """Workflow step identifiers for navigation."""

    EDIT = 0
    READ = 1
    PROJECTS = 2

    @property
    def label(self) -> str:
        """Get display label for step."""
        labels = {
            WorkflowStep.EDIT: "1. Design",
            WorkflowStep.READ: "2. Knit",
            WorkflowStep.PROJECTS: "Projects",
        }
        return labels.get(self, str(self.name))

    @property
    def icon(self) -> str:
        """Get icon/emoji for step."""
        icons = {
            WorkflowStep.EDIT: "✏",
            WorkflowStep.READ: "🧶",
            WorkflowStep.PROJECTS: "📁",
        }
        return icons.get(self, "○")
