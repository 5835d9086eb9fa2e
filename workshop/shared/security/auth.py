"""
Bearer token check for protected routes.

Tokens are issued by an external identity provider. This module only
verifies the signature and standard claims; the application never
looks inside the token beyond that. Disabled unless AUTH_ENABLED is set.
"""

import logging
from typing import Any, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from workshop.core.config import Settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class AuthenticationError(Exception):
    """Raised when a protected route is called without a valid bearer token."""

    message = "Invalid or missing bearer token"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def verify_token(token: str, settings: Settings) -> dict[str, Any]:
    """Decode a bearer token and return its claims.

    Args:
        token: Raw JWT from the Authorization header.
        settings: Application settings carrying the auth_* values.

    Raises:
        AuthenticationError: If the token is expired, malformed or
            signed with an unexpected key.
    """
    if not settings.auth_jwt_key:
        raise AuthenticationError("no verification key configured")

    options = {"verify_aud": settings.auth_audience is not None}
    try:
        return jwt.decode(
            token,
            settings.auth_jwt_key,
            algorithms=settings.auth_algorithms,
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
            options=options,
        )
    except ExpiredSignatureError as exc:
        raise AuthenticationError("token expired") from exc
    except JWTError as exc:
        raise AuthenticationError(f"token rejected: {exc}") from exc


def require_bearer_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> None:
    """FastAPI dependency guarding a router when authentication is enabled."""
    settings = request.app.state.settings
    if not settings.auth_enabled:
        return
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("missing bearer token")
    verify_token(credentials.credentials, settings)
