"""Main FastAPI application for agenthost."""

from .app import create_app
from .config_loader import get_server_address, load_config
from .logging import setup_logging

# Initialize logging
logger = setup_logging()

# Load configuration
config = load_config()
SERVER_HOST, SERVER_PORT = get_server_address(config)

app = create_app(config)
logger.info("FastAPI application created")


__all__ = ["app", "create_app", "config", "SERVER_HOST", "SERVER_PORT"]
