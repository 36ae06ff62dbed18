"""Core module initialization."""

from .exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    ExecutionStartupError,
    HostError,
    InvalidRequestError,
    build_error_payload,
    status_code_for,
)
from .registry import EntityInfo, EntityRegistry, get_registry, set_registry
from .sse import SSEDecoder, SSEEvent, encode_sse_event

__all__ = [
    "ConfigurationError",
    "EntityInfo",
    "EntityNotFoundError",
    "EntityRegistry",
    "ExecutionStartupError",
    "HostError",
    "InvalidRequestError",
    "SSEDecoder",
    "SSEEvent",
    "build_error_payload",
    "encode_sse_event",
    "get_registry",
    "set_registry",
    "status_code_for",
]
