"""Request context middleware for the catalog API.

Every request gets an ``X-Request-ID`` (taken from the client or freshly
generated). The id is bound into the structlog context for the duration of
the request, stored on ``request.state`` for the error envelopes and echoed
back on the response. One access log line is written per request with the
matched route template and, for item routes, the product or category id.
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Path parameters worth carrying into the access log.
LOGGED_PATH_PARAMS = ("product_id", "category_id")


def request_id_for(request: Request) -> str | None:
    """Return the correlation id assigned to a request, if any."""
    return getattr(request.state, "request_id", None)


def _route_context(request: Request) -> dict[str, Any]:
    route = request.scope.get("route")
    context: dict[str, Any] = {"route": getattr(route, "path", None)}

    path_params = request.scope.get("path_params") or {}
    for name in LOGGED_PATH_PARAMS:
        if name in path_params:
            context[name] = path_params[name]
    return context


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Correlate each request with an id and log its outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Catalog request handled",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                **_route_context(request),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the request context middleware on the application."""
    app.add_middleware(RequestContextMiddleware)
