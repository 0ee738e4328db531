"""
FastAPI Application Entry Point for the blackjack table.

This module creates and configures the FastAPI application with:
- HTTP routes for driving the single table session
- CORS middleware for development
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blackjack import __version__
from blackjack.config import get_settings
from blackjack.server.routes import router

# Configure logging
logging.basicConfig(
    level=get_settings().logging_level(logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Blackjack Table",
        description="Single-table blackjack dealing engine",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Blackjack table server starting up...")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Blackjack table server shutting down...")

    return app


# Create the application instance
app = create_app()
