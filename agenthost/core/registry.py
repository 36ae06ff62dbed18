"""Entity registry.

Resolves the target agent or workflow for a request by name. A module-level
instance is set by ``create_app`` so that routes can import it without
causing circular imports with the main module.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..entities.base import Agent, Workflow, WorkflowAgent
from .exceptions import ConfigurationError, EntityNotFoundError

logger = logging.getLogger("agenthost")


@dataclass
class EntityInfo:
    id: str
    type: str  # "agent" or "workflow"
    name: Optional[str]
    description: Optional[str]


class EntityRegistry:
    """Agents and workflows addressable by name."""

    def __init__(self) -> None:
        self._agents: dict[str, Agent] = {}
        self._workflows: dict[str, Workflow] = {}

    def register_agent(self, agent: Agent, name: Optional[str] = None) -> str:
        key = name or agent.display_name
        self._check_free(key)
        self._agents[key] = agent
        logger.info(f"Registered agent '{key}'")
        return key

    def register_workflow(self, workflow: Workflow, name: Optional[str] = None) -> str:
        key = name or workflow.name
        if not key:
            raise ConfigurationError("Workflows must have a name to be registered")
        self._check_free(key)
        self._workflows[key] = workflow
        self._agents[key] = WorkflowAgent(workflow, name=key)
        logger.info(f"Registered workflow '{key}'")
        return key

    def _check_free(self, key: str) -> None:
        if key in self._agents:
            raise ConfigurationError(f"Entity '{key}' is already registered")

    def _lookup_key(self, entity_id: str) -> Optional[str]:
        if entity_id in self._agents:
            return entity_id
        # Accept the prefixed ids UI clients send, e.g. agent_writer
        for key, agent in self._agents.items():
            prefix = "workflow" if key in self._workflows else "agent"
            if entity_id == f"{prefix}_{key.lower()}":
                return key
            if prefix == "agent" and entity_id in (agent.id, f"agent_{agent.id.lower()}"):
                return key
        return None

    def resolve(self, entity_id: str) -> Agent:
        """Return the executable agent for an entity id.

        Raises:
            EntityNotFoundError: If nothing is registered under the id
        """
        key = self._lookup_key(entity_id)
        if key is None:
            raise EntityNotFoundError(entity_id)
        return self._agents[key]

    def get_workflow(self, entity_id: str) -> Optional[Workflow]:
        key = self._lookup_key(entity_id)
        if key is None:
            return None
        return self._workflows.get(key)

    def list_entities(self) -> list[EntityInfo]:
        entities: list[EntityInfo] = []
        for key, agent in self._agents.items():
            is_workflow = key in self._workflows
            entities.append(EntityInfo(
                id=key,
                type="workflow" if is_workflow else "agent",
                name=agent.name,
                description=agent.description,
            ))
        return entities

    def __contains__(self, entity_id: str) -> bool:
        return self._lookup_key(entity_id) is not None

    def __len__(self) -> int:
        return len(self._agents)


# Global registry instance - set by create_app during initialization
registry: Optional[EntityRegistry] = None


def set_registry(registry_instance: Optional[EntityRegistry]) -> None:
    """Set the global registry instance."""
    global registry
    registry = registry_instance


def get_registry() -> EntityRegistry:
    """Get the global registry instance."""
    if registry is None:
        raise RuntimeError("Registry not initialized. Did you call set_registry?")
    return registry
