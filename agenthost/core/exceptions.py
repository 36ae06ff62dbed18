"""Core exceptions for the host.

Errors raised before the first streamed byte are classified into an HTTP
status by ``status_code_for``. Anything raised after that point cannot change
the transport status and simply ends the stream.
"""

from typing import Optional

from ..types.responses import ErrorResponse


class HostError(Exception):
    """Base exception for host errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(HostError):
    """Raised when there's an issue with the configuration or entity wiring."""
    pass


class InvalidRequestError(HostError):
    """Raised when an incoming request is invalid."""

    def __init__(
        self,
        message: str,
        code: str = "invalid_request",
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class EntityNotFoundError(HostError):
    """Raised when a requested agent or workflow is not registered."""

    def __init__(self, entity_id: str) -> None:
        super().__init__(
            f"Entity '{entity_id}' not found. Available entities must be "
            "registered with the agent or workflow name as the key."
        )
        self.entity_id = entity_id


class ExecutionStartupError(HostError):
    """Raised when an agent or workflow fails before producing any output."""
    pass


def status_code_for(error: Exception) -> int:
    """Classify a startup failure as bad input, not found, or internal."""
    if isinstance(error, InvalidRequestError):
        return 400
    if isinstance(error, EntityNotFoundError):
        return 404
    return 500


def build_error_payload(
    message: str,
    error_type: str,
    details: Optional[str] = None,
) -> ErrorResponse:
    """Build an OpenAI-style error body.

    Args:
        message: Human-readable error message
        error_type: Error type (invalid_request_error, internal_error, ...)
        details: Optional extra detail, such as a parser message

    Returns:
        Error response body
    """
    payload: ErrorResponse = {"error": {"message": message, "type": error_type}}
    if details:
        payload["error"]["details"] = details
    return payload
