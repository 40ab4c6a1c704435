"""
Prometheus metrics for the garden service.

Tracks HTTP traffic and plant catalog operations by outcome.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "garden_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "garden_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Catalog metrics
plant_operations_total = Counter(
    "garden_plant_operations_total",
    "Total plant catalog operations",
    ["operation", "outcome"],
)

plant_search_results = Histogram(
    "garden_plant_search_results",
    "Number of plants returned per list or search",
    ["operation"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 500),
)


def record_operation(operation: str, outcome: str) -> None:
    """
    Record a plant catalog operation.

    Args:
        operation: Manager operation name (add, delete, update, ...)
        outcome: "success" or the error kind that ended it
    """
    plant_operations_total.labels(operation=operation, outcome=outcome).inc()


def record_result_count(operation: str, count: int) -> None:
    """Record how many plants a list or search returned."""
    plant_search_results.labels(operation=operation).observe(count)


def record_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> Response:
    """Render all metrics in Prometheus exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
