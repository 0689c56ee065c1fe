"""Error responses for the dispatch boundary.

Maps ``HTTPError`` exceptions and unexpected handler failures to JSON
responses. A miss is routine and never logged as an error; a handler
failure is logged with its traceback.
"""

import logging

from burrow.errors import HTTPError
from burrow.http.request import Request
from burrow.http.response import Response, json_response

logger = logging.getLogger("burrow.server")


def handle_http_error(exc: HTTPError) -> Response:
    """Render an HTTPError as ``{"message": ..., "status": ...}``."""
    return json_response({"message": exc.detail, "status": exc.status}, status=exc.status)


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Log a handler failure and render it as a 500 response."""
    logger.exception("Handler failed for %s %s", request.method, request.url)
    payload: dict[str, object] = {"message": str(exc), "status": 500}
    if debug:
        payload["error"] = type(exc).__name__
    return json_response(payload, status=500)
