"""Entity discovery endpoints."""

import logging
from dataclasses import asdict

from fastapi.responses import JSONResponse

from ...core.exceptions import EntityNotFoundError, build_error_payload
from ...core.registry import get_registry
from ...entities.workflow_serialization import workflow_to_dict

logger = logging.getLogger("agenthost")


async def list_entities() -> JSONResponse:
    """GET /v1/entities - List registered agents and workflows."""
    entities = [asdict(info) for info in get_registry().list_entities()]
    return JSONResponse({"object": "list", "data": entities})


async def get_entity(entity_id: str) -> JSONResponse:
    """GET /v1/entities/{entity_id} - Describe one entity.

    Workflows include their graph under ``workflow_dump``.
    """
    registry = get_registry()
    try:
        agent = registry.resolve(entity_id)
    except EntityNotFoundError as exc:
        logger.warning(f"Entity lookup failed: {exc.message}")
        return JSONResponse(
            build_error_payload(exc.message, "invalid_request_error"),
            status_code=404,
        )

    workflow = registry.get_workflow(entity_id)
    info = next(e for e in registry.list_entities() if registry.resolve(e.id) is agent)
    body = asdict(info)
    if workflow is not None:
        body["workflow_dump"] = workflow_to_dict(workflow)
    return JSONResponse(body)
