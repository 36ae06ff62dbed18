"""API routes for the host."""

from .entities import get_entity, list_entities
from .responses import (
    create_response,
    dynamic_responses_endpoint,
    map_dynamic_responses,
    map_responses,
    validate_agent_name,
)

__all__ = [
    "create_response",
    "dynamic_responses_endpoint",
    "get_entity",
    "list_entities",
    "map_dynamic_responses",
    "map_responses",
    "validate_agent_name",
]
