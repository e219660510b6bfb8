"""HTML pages and redirects for shortlink."""

from .routes import router as web_router

__all__ = ["web_router"]
