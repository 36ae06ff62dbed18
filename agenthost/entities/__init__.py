"""Agent and workflow abstractions."""

from .base import (
    Agent,
    DirectEdge,
    Edge,
    FanInEdge,
    FanOutEdge,
    Workflow,
    WorkflowAgent,
    workflow_event_to_text,
)
from .workflow_serialization import workflow_to_dict

__all__ = [
    "Agent",
    "DirectEdge",
    "Edge",
    "FanInEdge",
    "FanOutEdge",
    "Workflow",
    "WorkflowAgent",
    "workflow_event_to_text",
    "workflow_to_dict",
]
