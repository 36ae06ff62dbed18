"""API module for the host."""

from .routes import (
    create_response,
    dynamic_responses_endpoint,
    get_entity,
    list_entities,
    map_dynamic_responses,
    map_responses,
)

__all__ = [
    "create_response",
    "dynamic_responses_endpoint",
    "get_entity",
    "list_entities",
    "map_dynamic_responses",
    "map_responses",
]
