"""
Metrics middleware for the hello service.

Records a Prometheus sample for every HTTP request.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .metrics import UNMATCHED_ENDPOINT


def resolve_endpoint(request: Request) -> str:
    """
    Return the route template that served the request.

    Unknown paths collapse into a single label value so arbitrary URLs
    cannot create new time series.
    """
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or UNMATCHED_ENDPOINT


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware to track Prometheus metrics for all HTTP requests.

    Tracks:
    - Request count by method, endpoint, and status code
    - Request duration by method and endpoint
    """

    def __init__(self, app: ASGIApp, track_func: Callable) -> None:
        """
        Initialize the middleware.

        Args:
            app: ASGI application
            track_func: Called with (method, endpoint, status_code, duration)
        """
        super().__init__(app)
        self.track_func = track_func

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time

        self.track_func(
            method=request.method,
            endpoint=resolve_endpoint(request),
            status_code=response.status_code,
            duration=duration,
        )

        return response
