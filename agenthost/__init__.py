"""agenthost - serve agents and workflows over the OpenAI Responses API.

This module provides:
- ResponsesStreamTranslator: Turns agent/workflow update streams into
  sequenced Responses API events
- EntityRegistry: Resolves agents and workflows by name
- Route helpers to mount per-agent and dynamic /v1/responses endpoints

Example:
    >>> from agenthost.main import app
    >>> import uvicorn
    >>> uvicorn.run(app, host="0.0.0.0", port=8000)
"""

from .config_loader import load_config
from .core import EntityRegistry, get_registry, set_registry
from .entities import Agent, Workflow, WorkflowAgent, workflow_to_dict
from .logging import logger, setup_logging
from .responses import ResponseSnapshotBuilder, ResponsesStreamTranslator

__all__ = [
    "Agent",
    "EntityRegistry",
    "ResponseSnapshotBuilder",
    "ResponsesStreamTranslator",
    "Workflow",
    "WorkflowAgent",
    "get_registry",
    "load_config",
    "logger",
    "set_registry",
    "setup_logging",
    "workflow_to_dict",
]
