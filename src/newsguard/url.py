"""URL handling utilities."""

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def extract_domain(url: str) -> str:
    """Extract domain name from URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain name (without 'www.' prefix), or "Unknown" if extraction fails.
    """
    try:
        parsed = urlparse(url)
        domain = parsed.hostname or ""
        if not domain:
            logger.warning("Could not get domain from url %s", url)
            return "Unknown"
        if domain.startswith("www."):
            domain = domain[4:]
        return domain
    except ValueError:
        return "Unknown"


def is_well_formed_url(value: object) -> bool:
    """Return True for absolute http(s) URLs that name a host."""
    if not isinstance(value, str) or not value.strip() or any(c.isspace() for c in value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
