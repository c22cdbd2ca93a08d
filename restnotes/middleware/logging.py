"""
REST Notes — Access Log Middleware
===================================

What:  One access line per request on the `restnotes.access` logger.
How:   Times the downstream handler, then logs the request line together
       with what happened to the resource:

           POST /notes 201 4.2ms [3f9a1c0e] created http://host/notes/7
           PATCH /notes/7 204 3.1ms [b81e44d2] updated
           GET /notes/99 404 1.0ms [0c55e7aa]

Log level follows the status class (5xx ERROR, 4xx WARNING, else INFO).
Request and response bodies are never logged. /health is not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from restnotes.middleware.request_id import request_id_var

logger = logging.getLogger("restnotes.access")

UNLOGGED_PATHS = frozenset({"/health"})


def level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def outcome(method: str, response: Response) -> str:
    """Short description of the effect a successful write had."""
    if response.status_code == 201:
        return f"created {response.headers.get('location', '?')}"
    if response.status_code == 204:
        return "deleted" if method == "DELETE" else "updated"
    return ""


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        rid = request_id_var.get("")
        effect = outcome(request.method, response)
        logger.log(
            level_for(response.status_code),
            "%s %s %d %.1fms [%s]%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            rid,
            f" {effect}" if effect else "",
            extra={
                "request_id": rid,
                "status": response.status_code,
                "location": response.headers.get("location"),
            },
        )
        return response
