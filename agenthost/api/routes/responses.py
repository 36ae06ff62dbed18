"""OpenAI Responses API endpoint handlers.

Implements POST endpoints that run an agent or workflow and reply in the
Responses format:
- Per-agent endpoints bound to one entity (/{agent_name}/v1/responses)
- A dynamic endpoint that resolves the entity from the request's "model" field
- Streaming: Responses API events written as SSE frames
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Optional
from urllib.parse import quote

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.requests import ClientDisconnect

from ...core.exceptions import (
    ConfigurationError,
    ExecutionStartupError,
    HostError,
    InvalidRequestError,
    build_error_payload,
    status_code_for,
)
from ...core.registry import get_registry
from ...core.sse import encode_sse_event
from ...entities.base import Agent
from ...responses import (
    ResponseSnapshotBuilder,
    ResponsesStreamTranslator,
    agent_run_result_to_response,
    request_input_to_messages,
)
from ...types.updates import ChatMessage, StreamUpdate

logger = logging.getLogger("agenthost")

SSE_HEADERS = {
    "Cache-Control": "no-cache,no-store",
    "Connection": "keep-alive",
    "Content-Encoding": "identity",
    "X-Accel-Buffering": "no",
}


def _error_response(error: HostError) -> JSONResponse:
    status_code = status_code_for(error)
    if isinstance(error, InvalidRequestError):
        payload = build_error_payload(error.message, "invalid_request_error", error.details)
    elif status_code == 404:
        payload = build_error_payload(error.message, "invalid_request_error")
    else:
        payload = build_error_payload(error.message, "internal_error")
    return JSONResponse(payload, status_code=status_code)


async def _read_payload(request: Request) -> dict[str, Any]:
    """Read and decode the request body.

    Raises:
        InvalidRequestError: If the body is not a JSON object
    """
    body = await request.body()
    try:
        payload = json.loads(body or b"{}")
    except json.JSONDecodeError as exc:
        raise InvalidRequestError(
            "Invalid JSON in request body.",
            code="invalid_json",
            details=str(exc),
        ) from exc
    if not isinstance(payload, dict):
        raise InvalidRequestError(
            "Request body must be a JSON object.",
            code="invalid_request_body",
        )
    return payload


def _parse_messages(payload: dict[str, Any]) -> list[ChatMessage]:
    if "input" not in payload:
        raise InvalidRequestError("Missing 'input' field in request.", code="missing_parameter")
    return request_input_to_messages(payload["input"])


async def _prime_stream(updates: AsyncIterator[StreamUpdate]) -> AsyncIterator[StreamUpdate]:
    """Await the first update so start-up failures surface before any byte is sent.

    Raises:
        ExecutionStartupError: If the agent fails before its first update
    """
    try:
        first = await updates.__anext__()
    except StopAsyncIteration:
        first = None
        exhausted = True
    except (asyncio.CancelledError, HostError):
        raise
    except Exception as exc:
        raise ExecutionStartupError(f"Execution failed: {exc}") from exc
    else:
        exhausted = False

    async def _chain() -> AsyncIterator[StreamUpdate]:
        if exhausted:
            return
        try:
            yield first
            async for update in updates:
                yield update
        finally:
            aclose = getattr(updates, "aclose", None)
            if aclose is not None:
                await aclose()

    return _chain()


async def _sse_stream(
    request: Request,
    translator: ResponsesStreamTranslator,
    updates: AsyncIterator[StreamUpdate],
    entity_id: str,
) -> AsyncIterator[bytes]:
    """Write translator events as SSE frames until the stream ends.

    Client disconnects stop translation silently. Failures after the first
    frame cannot change the HTTP status, so they are logged and the stream
    ends without a response.completed event.
    """
    cancel_event = asyncio.Event()
    try:
        async for event in translator.translate(updates, cancel_event):
            yield encode_sse_event(event)
            if await request.is_disconnected():
                logger.info(f"Client disconnected from stream for '{entity_id}'")
                cancel_event.set()
    except asyncio.CancelledError:
        logger.info(f"Stream for '{entity_id}' cancelled after {translator.events_emitted} events")
        raise
    except Exception as exc:
        logger.error(
            f"Stream for '{entity_id}' failed after {translator.events_emitted} events: {exc}",
            exc_info=True,
        )
        return

    logger.info(f"Stream for '{entity_id}' finished after {translator.events_emitted} events")


async def create_response(
    request: Request,
    agent: Agent,
    entity_id: str,
    payload: dict[str, Any],
) -> Response:
    """Run the agent for one request and reply in the Responses format.

    Args:
        request: The incoming request (used for disconnect detection)
        agent: The resolved agent
        entity_id: Name the agent was resolved under
        payload: The decoded request body

    Returns:
        JSONResponse for non-streaming, StreamingResponse for streaming
    """
    messages = _parse_messages(payload)
    is_stream = bool(payload.get("stream", False))
    metadata = payload.get("metadata") if isinstance(payload.get("metadata"), dict) else None
    snapshot_builder = ResponseSnapshotBuilder(model=entity_id, metadata=metadata)

    logger.info(
        f"Processing Responses request: entity={entity_id}, stream={is_stream}, "
        f"messages={len(messages)}, id={snapshot_builder.response_id}"
    )

    if is_stream:
        updates = await _prime_stream(agent.run_stream(messages))
        translator = ResponsesStreamTranslator(snapshot_builder)
        return StreamingResponse(
            _sse_stream(request, translator, updates, entity_id),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    try:
        result = await agent.run(messages)
    except HostError:
        raise
    except Exception as exc:
        raise ExecutionStartupError(f"Execution failed: {exc}") from exc

    return JSONResponse(snapshot_builder.build(result))


async def _handle(request: Request, resolve_agent) -> Response:
    try:
        payload = await _read_payload(request)
        agent, entity_id = resolve_agent(payload)
        return await create_response(request, agent, entity_id, payload)
    except ClientDisconnect:
        logger.warning("Client disconnected before request body was fully read")
        return Response(status_code=499)  # Client Closed Request
    except HostError as exc:
        log = logger.error if status_code_for(exc) >= 500 else logger.warning
        log(f"Responses request failed: {exc.message}")
        return _error_response(exc)
    except Exception as exc:
        logger.error(f"Unexpected error processing Responses request: {exc}", exc_info=True)
        return _error_response(ExecutionStartupError(f"Execution failed: {exc}"))


async def dynamic_responses_endpoint(request: Request) -> Response:
    """POST /v1/responses - resolve the entity from the "model" field."""
    logger.info("Received Responses API request")

    def resolve(payload: dict[str, Any]) -> tuple[Agent, str]:
        entity_id = payload.get("model")
        if not isinstance(entity_id, str) or not entity_id.strip():
            raise InvalidRequestError(
                "Missing 'model' field in request. The 'model' field must contain the agent/entity name.",
                code="missing_parameter",
            )
        return get_registry().resolve(entity_id), entity_id

    return await _handle(request, resolve)


def validate_agent_name(agent_name: str) -> None:
    """Reject names that would need escaping inside a URL path."""
    if quote(agent_name, safe="").lower() != agent_name.lower():
        raise ConfigurationError(
            f"Agent name '{agent_name}' contains characters invalid for URL routes."
        )


def map_responses(
    app: FastAPI,
    agent_name: str,
    responses_path: Optional[str] = None,
) -> str:
    """Mount a Responses endpoint bound to one registered agent.

    Args:
        app: The application to add the route to
        agent_name: Registered entity name
        responses_path: Custom route path, defaults to /{agent_name}/v1/responses

    Returns:
        The mounted path
    """
    if responses_path is None:
        validate_agent_name(agent_name)
        responses_path = f"/{agent_name}/v1/responses"

    # Resolve eagerly so a typo fails at startup, not on first request
    agent = get_registry().resolve(agent_name)

    async def agent_responses_endpoint(request: Request) -> Response:
        logger.info(f"Received Responses API request for '{agent_name}'")
        return await _handle(request, lambda payload: (agent, agent_name))

    app.post(responses_path, name=f"{agent.display_name}/CreateResponse")(agent_responses_endpoint)
    logger.info(f"Mapped Responses endpoint for '{agent_name}' at {responses_path}")
    return responses_path


def map_dynamic_responses(app: FastAPI, base_path: Optional[str] = None) -> str:
    """Mount the dynamic Responses endpoint that resolves entities per request."""
    base_path = base_path or "/v1/responses"
    app.post(base_path, name="CreateResponse")(dynamic_responses_endpoint)
    logger.info(f"Mapped dynamic Responses endpoint at {base_path}")
    return base_path
