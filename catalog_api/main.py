"""Catalog API main application module.

This module builds the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.debug import router as debug_router
from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import REQUEST_ID_HEADER, request_id_for, setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.infrastructure.config import Settings, settings
from catalog_api.infrastructure.database import create_tables, engine
from catalog_api.infrastructure.logging import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(
        "Starting Catalog API",
        version=app_settings.api_version,
        debug=app_settings.debug,
        debug_routes=app_settings.enable_debug_routes,
    )

    if app_settings.create_tables:
        await create_tables()
        logger.info("Database tables ready")

    yield

    # Shutdown
    logger.info("Shutting down Catalog API")
    await engine.dispose()


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def error_envelope(
    request: Request, error_code: str, message: str, details: list
) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "request_id": request_id_for(request),
    }


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions, including unmatched routes, with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(request, error_code, message, details),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format.

    Runs outside the request context middleware, so the request id header
    is set here.
    """
    request_id = request_id_for(request)

    logger.exception(
        "Unhandled exception in catalog handler",
        path=request.url.path,
        method=request.method,
        request_id=request_id,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content=error_envelope(request, "INTERNAL_ERROR", "An internal error occurred", []),
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the catalog application.

    Args:
        app_settings: Settings to build from. Defaults to the environment.

    Returns:
        Configured FastAPI application.
    """
    app_settings = app_settings or settings

    application = FastAPI(
        title="Catalog API",
        description="Product and category catalog with generated product codes",
        version=app_settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.settings = app_settings

    # CORS middleware (must be added before custom middleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Request id correlation and access logging
    setup_middleware(application)

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    application.include_router(health_router, tags=["Health"])
    if app_settings.enable_debug_routes:
        application.include_router(debug_router)
    application.include_router(products_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("catalog_api.main:app", host=settings.host, port=settings.port)
