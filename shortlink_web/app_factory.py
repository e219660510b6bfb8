"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shortlink import __version__
from shortlink.errors import InvalidPayloadError, ShortLinkError
from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """Render every failure as a ``{"error": message}`` JSON envelope."""

    @app.exception_handler(ShortLinkError)
    async def shortlink_error_handler(request: Request, exc: ShortLinkError):
        if exc.status_code >= 500:
            logger.error(f"Error in {request.method} {request.url.path}: {exc.message}")
        else:
            logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message} {exc.details or ''}")
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid payload for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            {"error": InvalidPayloadError.message},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error in {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app(
    service_instance,
    config,
    lifespan=None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance (None when the lifespan sets it)
        config: Configuration instance
        lifespan: Optional lifespan context manager
        logger: Optional logger

    Returns:
        Configured FastAPI app
    """
    logger = logger or logging.getLogger("shortlink.web")

    app = FastAPI(
        title="shortlink",
        description="URL shortening and redirect service",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger

    app.add_middleware(LoggingMiddleware, logger=logger)
    register_exception_handlers(app, logger)

    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
