"""
Metrics middleware for Prometheus.

Records HTTP request metrics for monitoring.
"""

import re
import time
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.metrics import (
    http_request_duration_seconds,
    http_requests_total,
)

_NUMERIC_SEGMENT = re.compile(r"/\d+")


class MetricsMiddleware:
    """
    Middleware to record HTTP metrics for Prometheus.

    Records:
    - Request count by method, endpoint, status
    - Request duration histogram
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request and record metrics."""
        start_time = time.time()

        try:
            response = self.get_response(request)
        except Exception:
            self._record(request.method, self._endpoint(request), 500, time.time() - start_time)
            raise

        self._record(
            request.method, self._endpoint(request), response.status_code, time.time() - start_time
        )
        return response

    def _record(self, method: str, endpoint: str, status_code: int, duration: float) -> None:
        http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status_code=status_code,
        ).inc()
        http_request_duration_seconds.labels(
            method=method,
            endpoint=endpoint,
        ).observe(duration)

    @staticmethod
    def _endpoint(request: HttpRequest) -> str:
        """
        Label for the request.

        Uses the matched URL route so arbitrary path segments do not
        create new label values. request.path never carries the query
        string, so license parameters stay out of labels either way.
        """
        match = getattr(request, "resolver_match", None)
        if match is not None and match.route:
            return match.route
        return _NUMERIC_SEGMENT.sub("/{id}", request.path)
