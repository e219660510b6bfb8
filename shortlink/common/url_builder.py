"""URL building utilities for shortlink."""

from urllib.parse import quote

# Printable ASCII passes through a Location header untouched
_LOCATION_SAFE = "".join(chr(c) for c in range(0x21, 0x7F))


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., /s)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/{short_code}"
    return f"{base}/{short_code}"


def redirect_location(original_url: str) -> str:
    """Location header value for a stored URL.

    Printable ASCII, including existing percent escapes, is kept as stored.
    Anything else is percent-encoded from its UTF-8 bytes.
    """
    return quote(original_url, safe=_LOCATION_SAFE)
