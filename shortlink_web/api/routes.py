"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from shortlink.common.url_builder import build_short_url
from .schemas import ShortenRequest, ShortenResponse, HealthResponse, ErrorResponse

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": ShortenResponse, "description": "URL was already shortened"},
        400: {"model": ErrorResponse, "description": "Invalid JSON payload or URL"},
        500: {"model": ErrorResponse, "description": "Allocation or storage failure"},
    },
    summary="Create short URL",
    description="Shorten a URL. Shortening the same URL again returns the same short URL.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create (or return the existing) short URL."""
    service = request.app.state.service
    config = request.app.state.config

    result = await service.shorten(body.url)

    short_url = build_short_url(
        short_code=result.link.short_code,
        base_url=config.base_url,
        path_prefix=config.path_prefix,
    )
    response = ShortenResponse(original_url=result.link.original_url, short_url=short_url)

    return JSONResponse(
        content=response.model_dump(by_alias=True),
        status_code=status.HTTP_201_CREATED if result.created else status.HTTP_200_OK,
    )


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service and its backing store are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
