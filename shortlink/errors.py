"""
Error classes for consistent error handling.

Every error carries the HTTP status it maps to, so the web layer can render
any of them as a ``{"error": message}`` envelope.
"""

from typing import Optional, Dict, Any


class ShortLinkError(Exception):
    """
    Base error class.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
        details: Optional additional error details
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class InvalidPayloadError(ShortLinkError):
    """400 Request body is not the expected JSON object."""
    status_code = 400
    message = "Invalid JSON payload"


class InvalidURLError(ShortLinkError):
    """400 URL failed validation."""
    status_code = 400
    message = "Invalid URL provided"


class CodeAllocationError(ShortLinkError):
    """500 No unique short code found within the attempt bound."""
    status_code = 500
    message = "Failed to allocate short code"


class StorageError(ShortLinkError):
    """500 Backing store failure."""
    status_code = 500
    message = "Storage error"
