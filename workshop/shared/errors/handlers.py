"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP problem responses (RFC 7807).
No stack traces or internal details are exposed to clients.
Handlers are registered explicitly, most specific first.
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workshop.domain.people.errors import (
    PeopleDomainError,
    PersonNotFoundError,
    UnknownSortKeyError,
    ValidationFailedError,
)
from workshop.shared.security.auth import AuthenticationError

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred."

# Error types raised by our own field validators; their message is the detail.
_PLAIN_MESSAGE_TYPES = {"not_empty"}
_LOCATION_ROOTS = {"body", "query", "path", "header"}


def problem_response(
    request: Request,
    status_code: int,
    detail: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a consistent problem detail response."""
    body: dict[str, Any] = {
        "type": "about:blank",
        "title": HTTPStatus(status_code).phrase,
        "status": int(status_code),
        "detail": detail,
        "instance": request.url.path,
    }
    return JSONResponse(
        status_code=int(status_code),
        content=body,
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _violation_message(error: dict[str, Any]) -> str:
    """Render one Pydantic validation error as a readable sentence."""
    if error.get("type") in _PLAIN_MESSAGE_TYPES:
        return error["msg"]
    location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
    if not location:
        return error["msg"]
    return f"{'.'.join(location)}: {error['msg']}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PersonNotFoundError)
    async def handle_person_not_found(
        request: Request, exc: PersonNotFoundError
    ) -> JSONResponse:
        """Handle missing person errors."""
        logger.warning("Person not found: %s", exc.person_id)
        return problem_response(request, HTTPStatus.NOT_FOUND, exc.message)

    @app.exception_handler(ValidationFailedError)
    async def handle_validation_failed(
        request: Request, exc: ValidationFailedError
    ) -> JSONResponse:
        """Handle entity validation failures."""
        logger.warning("Validation failed: %s", exc.message)
        return problem_response(request, HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies and query parameters."""
        detail = ". ".join(_violation_message(e) for e in exc.errors())
        logger.warning("Request validation failed: %s", detail)
        return problem_response(request, HTTPStatus.BAD_REQUEST, detail)

    @app.exception_handler(UnknownSortKeyError)
    async def handle_unknown_sort_key(
        request: Request, exc: UnknownSortKeyError
    ) -> JSONResponse:
        """Handle listings requested with an unsupported sort key."""
        logger.warning("Unknown sort key: %s", exc.sort_key)
        return problem_response(request, HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        """Handle missing or rejected bearer tokens."""
        logger.warning("Authentication failed: %s", exc.reason)
        return problem_response(
            request,
            HTTPStatus.UNAUTHORIZED,
            exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(PeopleDomainError)
    async def handle_people_domain(
        request: Request, exc: PeopleDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled people domain errors."""
        logger.error("Unhandled people domain error: %s", exc.message)
        return problem_response(
            request, HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_DETAIL
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render framework HTTP errors (unknown route, bad method) as problems."""
        return problem_response(
            request, exc.status_code, str(exc.detail), headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("An unhandled exception has occurred: %s", type(exc).__name__)
        return problem_response(
            request, HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_DETAIL
        )
