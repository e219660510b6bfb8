"""Core business logic for shortlink."""

from .shortcode import ShortCodeGenerator
from .service import ShortLinkService, ShortenResult, AllocationResult, AllocationStatus

__all__ = [
    "ShortCodeGenerator",
    "ShortLinkService",
    "ShortenResult",
    "AllocationResult",
    "AllocationStatus",
]

__version__ = "1.0.0"
