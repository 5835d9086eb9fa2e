"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default limit on every route.
Protects against denial-of-service and resource abuse.
"""

from http import HTTPStatus

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from workshop.core.config import Settings
from workshop.shared.errors.handlers import problem_response


def build_limiter(settings: Settings) -> Limiter:
    """Build a limiter keyed by client address with the configured default."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a problem response.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 problem response naming the exceeded limit.
    """
    return problem_response(
        request,
        HTTPStatus.TOO_MANY_REQUESTS,
        f"Rate limit exceeded: {exc.detail}",
    )
