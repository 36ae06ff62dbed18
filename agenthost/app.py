"""FastAPI application factory for agenthost."""

import logging
from typing import Any, Mapping, Optional

from fastapi import FastAPI

from .api.routes import get_entity, list_entities, map_dynamic_responses, map_responses
from .config_loader import get_responses_settings, get_server_address, load_config
from .core.registry import EntityRegistry, set_registry
from .entities.loader import load_entities

logger = logging.getLogger("agenthost")


def create_app(
    config: Optional[Mapping[str, Any]] = None,
    registry: Optional[EntityRegistry] = None,
) -> FastAPI:
    """Build the application.

    Args:
        config: Parsed configuration; loaded from disk when omitted
        registry: Pre-populated registry; entities from the config are added to it

    Returns:
        The configured FastAPI application instance
    """
    if config is None:
        config = load_config()
    registry = registry if registry is not None else EntityRegistry()

    load_entities(config, registry)
    set_registry(registry)
    logger.info(f"Entity registry initialized with {len(registry)} entities")

    settings = get_responses_settings(config)
    host, port = get_server_address(config)

    app = FastAPI(title="agenthost")
    app.state.config = config
    app.state.registry = registry

    @app.on_event("startup")
    async def startup_event():
        """Handle application startup."""
        logger.info("agenthost starting up...")
        logger.info("Configured bind address %s:%s", host, port)
        for info in registry.list_entities():
            logger.info(f"  - {info.type} {info.id}")
        logger.info("agenthost ready to handle requests")

    if settings["enable_dynamic_endpoint"]:
        map_dynamic_responses(app, settings["base_path"])
    else:
        logger.info("Dynamic Responses endpoint is disabled in configuration")

    for endpoint in settings["agent_endpoints"]:
        map_responses(app, endpoint["name"], endpoint.get("path"))

    if settings["enable_entities_endpoint"]:
        app.get("/v1/entities")(list_entities)
        app.get("/v1/entities/{entity_id}")(get_entity)

    return app

