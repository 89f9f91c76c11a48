"""Middleware that logs every incoming request."""

import json
import logging
from datetime import UTC, datetime

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

BODY_LOGGED_METHODS = {"POST", "PUT"}


def format_request_body(raw_body: bytes) -> str:
    """Pretty-print a request body as JSON, falling back to the raw text."""
    try:
        return json.dumps(json.loads(raw_body), indent=2)
    except ValueError:
        return raw_body.decode("utf-8", errors="replace")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Log timestamp, method and path of each request, plus the body of writes.

    The request is always forwarded unchanged; the body read here stays
    available to downstream handlers.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        timestamp = datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        logger.info(f"[{timestamp}] {request.method} {path}")

        if request.method in BODY_LOGGED_METHODS:
            raw_body = await request.body()
            logger.info(f"Request Body: {format_request_body(raw_body)}")

        return await call_next(request)
