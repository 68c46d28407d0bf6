"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, backend.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.deps.dependencies import get_service_cache
from backend.boundary.db.connection import dispose_engine
from backend.boundary.db.create_tables import create_all_tables
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import RequestLoggingMiddleware

from . import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info(
        f"{__name__}:lifespan - Starting {settings.app_name}",
        extra={"environment": settings.environment},
    )
    if settings.database.is_sqlite:
        logger.info(f"{__name__}:lifespan - SQLite database, creating tables")
        await create_all_tables()

    cache = get_service_cache()
    _ = cache.chunk_store
    _ = cache.retriever
    logger.info(
        f"{__name__}:lifespan - Service cache pre-warmed",
        extra={"store_type": settings.chunk_store.store_type},
    )

    yield

    # Shutdown
    cache.clear()
    await dispose_engine()
    logger.info(f"{__name__}:lifespan - Service cache cleared, engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Study assistant backend: file ingestion, chunk retrieval and study material generation",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.api.main:app",
        host=settings.host,
        port=settings.port,
    )
