"""
Prometheus metrics middleware for HTTP requests.

This middleware tracks request counts, duration and in-progress requests.
Requests are labelled with the matched route template instead of the raw
path, so ``/api/authors/1`` and ``/api/authors/2`` share one series.
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.utils.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)

UNMATCHED_ENDPOINT = "unmatched"


def route_template(request: Request) -> str:
    """
    Return the path template of the route that handled the request.

    The router stores the matched route in the request scope, so this is
    only meaningful once the request has been dispatched.

    Args:
        request: The incoming HTTP request.

    Returns:
        Route path such as ``/api/books/{book_id}``, or ``"unmatched"``
        when no route with a path template handled the request.
    """
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ENDPOINT


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware to track Prometheus metrics for HTTP requests.

    Tracks the following metrics:
    - catalog_http_requests_total: requests by method, endpoint and status
    - catalog_http_request_duration_seconds: histogram of request durations
    - catalog_http_requests_in_progress: gauge of in-progress requests
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process the request and track metrics.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            HTTP response from the endpoint.
        """
        method = request.method

        http_requests_in_progress.labels(method=method).inc()
        start_time = time.time()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            endpoint = route_template(request)
            http_request_duration_seconds.labels(
                method=method, endpoint=endpoint
            ).observe(time.time() - start_time)
            http_requests_total.labels(
                method=method, endpoint=endpoint, status_code=status_code
            ).inc()
            http_requests_in_progress.labels(method=method).dec()
