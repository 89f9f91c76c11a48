"""Main application entry point for the Tasty Bites menu API.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from tasty_bites_api.handlers.api_handler import create_app
from tasty_bites_api.observability import configure_logging, setup_observability
from tasty_bites_api.repositories.menu_repository import MenuRepository

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def get_port() -> int:
    """Read the listen port from the environment.

    Returns:
        Port from PORT, or 3000 when unset or empty
    """
    return int(os.getenv("PORT") or DEFAULT_PORT)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Seeds the in-memory menu repository
    3. Creates the FastAPI app with the menu endpoints
    4. Optionally sets up OpenTelemetry

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing Tasty Bites menu API...")

    menu_repository = MenuRepository()
    logger.info(f"Menu repository seeded with {len(menu_repository.items)} items")

    app = create_app(menu_repository=menu_repository)

    if os.getenv("OTEL_ENABLED", "false").lower() == "true":
        setup_observability(app)

    logger.info("Tasty Bites menu API initialized successfully")

    return app


# Build the app at import except under tests, which construct their own
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = get_port()
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Tasty Bites API running at http://localhost:{port}")
    logger.info(f"API documentation available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
