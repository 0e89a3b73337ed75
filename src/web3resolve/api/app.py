"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from web3resolve import __version__
from web3resolve.api.routes import cache_router, config_router, health_router, resolve_router
from web3resolve.config import Web3ResolveSettings, get_settings
from web3resolve.resolution.engine import ResolutionEngine

logger = logging.getLogger(__name__)


def create_app(
    settings: Web3ResolveSettings | None = None,
    *,
    engine: ResolutionEngine | None = None,
    title: str = "web3resolve API",
    description: str = "Cached, batched resolution of ENS names, Base names and addresses",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. Loaded from the environment if not provided.
        engine: Pre-built engine (tests). Built from settings at startup otherwise.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    logging.getLogger("web3resolve").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create the resolution engine on startup and close it on shutdown."""
        logger.info("Initializing resolution engine...")
        app.state.engine = engine or ResolutionEngine.from_settings(settings)
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")
        await app.state.engine.close()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")
    app.include_router(cache_router, prefix="/api/v1")
    app.include_router(config_router, prefix="/api/v1")

    return app
