"""Workflow page widgets."""

from ui.workflow.pages.edit_page import EditPage
from ui.workflow.pages.read_page import ReadPage
from ui.workflow.pages.projects_page import ProjectsPage

__all__ = [
    "EditPage",
    "ReadPage",
    "ProjectsPage",
]
