"""Workflow widget package for central application navigation."""

from ui.workflow.models import WorkflowStep
from ui.workflow.step_bar import WorkflowStepBar
from ui.workflow.central_workflow import CentralWorkflowWidget

__all__ = [
    "WorkflowStep",
    "WorkflowStepBar",
    "CentralWorkflowWidget",
]
