"""Rate limiting service for tool endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.devtools.config import settings


# Initialize rate limiter with in-memory storage
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],  # No global limits, we'll apply per-endpoint
    storage_uri="memory://",  # In-memory storage for single-instance deployment
    enabled=settings.rate_limit_enabled,
)


class RateLimitTiers:
    """
    Rate limit tiers for different endpoint categories.

    The application is unauthenticated, so every tier is keyed on the
    client IP address.
    """

    # Tool actions (generate, parse, decode, verify)
    TOOL = [settings.tool_rate_limit]

    # Page renders
    PAGE = ["120 per minute"]


# Convenience decorators for common tiers
# Note: These decorators require the endpoint to have a 'request: Request' parameter
# as per slowapi documentation requirements
tool_rate_limit = limiter.limit(";".join(RateLimitTiers.TOOL))
page_rate_limit = limiter.limit(";".join(RateLimitTiers.PAGE))
