"""
FastAPI application factory.

Creates and configures the FastAPI application instance. Settings are
loaded inside create_app(), so a missing or invalid JWT_SECRET or
JWT_EXPIRES_IN aborts startup before any request is accepted.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging

from .dependencies import ServiceContainer, get_container, set_container
from .error_handlers import register_error_handlers
from .routes import auth, health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Connects the identity directory on startup.
    """
    container = get_container()
    await container.connect()
    settings = container.settings
    logger.info(
        "Starting %s on %s:%s (directory=%s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.directory_backend,
    )
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    set_container(ServiceContainer(settings))

    app = FastAPI(
        title=settings.app_name,
        description="Identity and access-control API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    return app
