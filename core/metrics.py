"""
Prometheus metrics for the license manager.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Entitlement metrics. Outcome is the response code
# (e.g. "ok", "UNAUTHORIZED", "COLLABORATOR_TIMEOUT").
entitlement_requests_total = Counter(
    "entitlement_requests_total",
    "Total entitlement API requests",
    ["action", "outcome"],
)

entitlement_request_duration_seconds = Histogram(
    "entitlement_request_duration_seconds",
    "Entitlement dispatch duration in seconds",
    ["action"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
)

signed_urls_issued_total = Counter(
    "signed_urls_issued_total",
    "Total signed download URLs issued",
    ["bucket"],
)
