"""
Request logging middleware.

Logs one line per request with method, path, status and latency.
Reads `X-Request-ID` (or generates one), binds it to the logging context
and reflects it in the response. Errors no exception handler turned into
a response become a generic 500 problem here, so that the response still
passes through the outer middleware (security headers, CORS).
Never logs request bodies or headers.
"""

import logging
import re
import time
import uuid
from http import HTTPStatus

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from workshop.shared.errors.handlers import UNEXPECTED_ERROR_DETAIL, problem_response
from workshop.shared.logging import request_id_var

logger = logging.getLogger("workshop.request")

REQUEST_ID_HEADER = "X-Request-ID"

_ALLOWED_CHARS = re.compile(r"^[A-Za-z0-9._\-]{1,200}$")


def _coerce_request_id(raw: str | None) -> str:
    """Keep a safe client-provided request id, or generate a new one."""
    if raw and _ALLOWED_CHARS.match(raw):
        return raw
    return uuid.uuid4().hex


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs each request and tags it with a request id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = _coerce_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "%s %s -> unhandled error in %.1fms",
                    request.method,
                    request.url.path,
                    (time.perf_counter() - started) * 1000,
                )
                response = problem_response(
                    request, HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_DETAIL
                )
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "%s %s -> %d in %.1fms",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
            )
            return response
        finally:
            request_id_var.reset(token)
