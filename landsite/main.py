"""FastAPI application entry point."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from landsite import __version__
from landsite.api.blogs import router as blogs_router
from landsite.api.content import routers as content_routers
from landsite.api.health import router as health_router
from landsite.config import Settings
from landsite.database import create_schema, open_database
from landsite.exceptions import SlugConflictError
from landsite.services.invalidation_service import Invalidator, create_revalidator

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if debug else logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan: startup and shutdown."""
    settings: Settings = app.state.settings
    settings.validate_runtime_security()
    _configure_logging(settings.debug)
    logger.info("Starting LandSite (debug=%s)", settings.debug)

    try:
        engine, session_factory = open_database(settings)
        app.state.engine = engine
        app.state.session_factory = session_factory
    except Exception as exc:
        logger.critical(
            "Failed to initialize database: %s. Check database URL and permissions.", exc
        )
        raise

    try:
        await create_schema(engine)
    except Exception as exc:
        logger.critical("Failed to create database schema: %s.", exc)
        raise

    yield

    try:
        await engine.dispose()
    except Exception as exc:
        logger.error("Error during engine disposal: %s", exc, exc_info=True)

    logger.info("LandSite stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    docs_enabled = settings.debug or settings.expose_docs

    app = FastAPI(
        title="LandSite",
        description="Content API for a bilingual landscaping company website",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = settings
    app.state.invalidator = Invalidator(
        create_revalidator(settings), image_prefix=settings.image_route_prefix
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)

    cors_origins = (
        settings.cors_origins
        if settings.cors_origins
        else (["http://localhost:3000", "http://localhost:8000"] if settings.debug else [])
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(blogs_router)
    for router in content_routers:
        app.include_router(router)

    # Global exception handlers

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = []
        for err in exc.errors():
            loc = err.get("loc", ())
            field = str(loc[-1]) if loc else "unknown"
            errors.append({"field": field, "message": err.get("msg", "Invalid value")})
        logger.warning(
            "RequestValidationError in %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        return JSONResponse(status_code=422, content={"detail": errors})

    @app.exception_handler(SlugConflictError)
    async def slug_conflict_handler(request: Request, exc: SlugConflictError) -> JSONResponse:
        logger.warning("SlugConflictError in %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=409,
            content={"detail": "Could not assign a unique slug, please retry"},
        )

    @app.exception_handler(OperationalError)
    async def operational_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
        logger.error(
            "OperationalError in %s %s: %s", request.method, request.url.path, exc, exc_info=exc
        )
        return JSONResponse(
            status_code=503,
            content={"detail": "Database temporarily unavailable"},
        )

    return app


app = create_app()


def cli_entry() -> None:
    """CLI entry point for running the server."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        "landsite.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
