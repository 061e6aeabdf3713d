"""HTTP client utilities with consistent user agent."""

from typing import Optional

from lifecycle_timeline import __version__

USER_AGENT = f"lifecycle-timeline/{__version__}"


def get_default_headers(accept: Optional[str] = "application/json") -> dict:
    """
    Get default HTTP headers with user agent.

    Args:
        accept: Optional Accept header value

    Returns:
        Dictionary of HTTP headers
    """
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    return headers
