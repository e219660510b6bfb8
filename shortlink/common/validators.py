"""Validation utilities for shortlink."""

from urllib.parse import urlparse
from typing import Tuple

# UTF-8 bytes; keeps UNIQUE (original_url) under the btree row size limit
MAX_URL_LENGTH = 2048


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    A URL is accepted when it parses and carries both a scheme and a host.
    Any scheme is allowed (http, https, ftp, ...).

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    try:
        encoded = url.encode("utf-8")
    except UnicodeEncodeError:
        return False, "URL is not valid UTF-8"

    if len(encoded) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} bytes)"

    if url != url.strip() or any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    try:
        result = urlparse(url)
        # Accessing .port validates the port component
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if not result.scheme:
        return False, "URL must have a scheme"

    if not result.hostname:
        return False, "URL must have a host"

    return True, ""
