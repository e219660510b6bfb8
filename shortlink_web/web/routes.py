"""Web interface routes implementation."""

import html
import os

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, Response

from shortlink.common.url_builder import redirect_location

router = APIRouter()

static_dir = os.path.join(os.path.dirname(__file__), "..", "static")


def _read_page(name: str) -> str:
    with open(os.path.join(static_dir, name), "r", encoding="utf-8") as f:
        return f.read()


def not_found_page(message: str = "The page you are looking for does not exist.") -> HTMLResponse:
    """Render the not-found page with a 404 status."""
    content = _read_page("not_found.html").replace("{{error_message}}", html.escape(message))
    return HTMLResponse(content=content, status_code=status.HTTP_404_NOT_FOUND)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the landing page."""
    return HTMLResponse(content=_read_page("index.html"))


@router.get("/404", response_class=HTMLResponse, include_in_schema=False)
async def not_found(request: Request):
    """Serve the not-found page."""
    return not_found_page()


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service
    config = request.app.state.config

    original_url = await service.resolve(short_code)

    if original_url is None:
        return not_found_page(f"Short code '{short_code}' not found")

    return Response(
        status_code=config.redirect_status_code,
        headers={"location": redirect_location(original_url)},
    )
