"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wholesale.config.settings import Settings, get_settings
from wholesale.config.logging_config import setup_logging
from wholesale.repositories.sqlalchemy.database import configure_database, init_db
from wholesale.api.routers import (
    accounts_router,
    transactions_router,
    legacy_transactions_router,
)
from wholesale.core.exceptions import AppError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings)
        logger.info(f"Starting {settings.app_name} {settings.app_version}")
        configure_database(settings)
        init_db()
        yield
        # Shutdown (engine is disposed on reconfiguration)
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        description="RESTful API for managing accounts and account transactions",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Include routers
    app.include_router(accounts_router, prefix=settings.api_prefix)
    app.include_router(transactions_router, prefix=settings.api_prefix)
    app.include_router(legacy_transactions_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            message = "Internal server error"
        else:
            message = exc.message
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "message": message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Opaque 500 for anything unexpected."""
        logger.exception(f"{request.method} {request.url.path} failed")
        return JSONResponse(
            status_code=500,
            content={"error": "INTERNAL_ERROR", "message": "Internal server error"},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
