"""
Main Application - Main Layer

This module builds the FastAPI application: it runs the bootstrapper,
registers the middleware and includes the routers. The views router is
included last because its ``/{slug}`` route matches any single segment.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from techstacks.main.bootstrap import AppHost
from techstacks.main.config import RuntimeSettings, get_settings
from techstacks.main.container import app_lifespan
from techstacks.presentation.controllers import (
    auth_router,
    create_sitemap_router,
    query_router,
    views_router,
)
from techstacks.presentation.middleware import NotFoundPathMiddleware
from techstacks.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Uses the container's app_lifespan so the database engine is released
    when the application shuts down.
    """
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app(runtime_settings: Optional[RuntimeSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        runtime_settings: Process settings, read from the environment when omitted

    Returns:
        FastAPI: The configured FastAPI application
    """
    # Logging is available while the settings are being read
    configure_logging()
    settings = runtime_settings or get_settings()
    update_logging_from_settings(settings)

    result = AppHost(settings.host.content_root).configure()

    app = FastAPI(
        title=result.host_config.app_name,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.bootstrap = result

    app.add_middleware(NotFoundPathMiddleware, paths=result.not_found_paths)

    app.include_router(auth_router)
    app.include_router(query_router)
    app.include_router(create_sitemap_router(result.sitemap_index, result.host_config))
    app.include_router(views_router)

    return app
