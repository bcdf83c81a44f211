"""
Prometheus metrics for the read cache and HTTP requests.

The ``_get_or_create_*`` helpers prevent duplicate registration errors
during development with --reload (and across test modules) by retrieving
existing metrics from the registry if they already exist.
"""

from prometheus_client import REGISTRY, Counter, Gauge, Histogram


def _get_or_create_counter(
    name: str, doc: str, labels: list[str] | None = None
) -> Counter:
    """
    Get existing counter or create new one.

    Args:
        name: Metric name.
        doc: Metric documentation.
        labels: Optional list of label names.

    Returns:
        Counter instance.
    """
    try:
        return Counter(name, doc, labels or [])
    except ValueError:
        # Metric already exists, retrieve it from registry
        return REGISTRY._names_to_collectors[name]


def _get_or_create_gauge(
    name: str, doc: str, labels: list[str] | None = None
) -> Gauge:
    """
    Get existing gauge or create new one.

    Args:
        name: Metric name.
        doc: Metric documentation.
        labels: Optional list of label names.

    Returns:
        Gauge instance.
    """
    try:
        return Gauge(name, doc, labels or [])
    except ValueError:
        # Metric already exists, retrieve it from registry
        return REGISTRY._names_to_collectors[name]


cache_hits_total = _get_or_create_counter(
    "catalog_cache_hits_total",
    "Total read cache hits",
    ["tier"],  # tier: memory, redis
)

cache_misses_total = _get_or_create_counter(
    "catalog_cache_misses_total",
    "Total read cache misses (value computed from the database)",
)

memory_cache_evictions_total = _get_or_create_counter(
    "catalog_memory_cache_evictions_total",
    "Total LRU evictions from the in-memory cache",
)

memory_cache_size = _get_or_create_gauge(
    "catalog_memory_cache_size",
    "Current number of entries in the in-memory cache",
)


def _get_or_create_histogram(
    name: str,
    doc: str,
    labels: list[str] | None = None,
    buckets: tuple[float, ...] | None = None,
) -> Histogram:
    """
    Get existing histogram or create new one.

    Args:
        name: Metric name.
        doc: Metric documentation.
        labels: Optional list of label names.
        buckets: Optional bucket boundaries.

    Returns:
        Histogram instance.
    """
    try:
        if buckets:
            return Histogram(name, doc, labels or [], buckets=buckets)
        return Histogram(name, doc, labels or [])
    except ValueError:
        # Metric already exists, retrieve it from registry
        return REGISTRY._names_to_collectors[name]


# HTTP request metrics, labelled by route template (e.g. /api/authors/{author_id})
http_requests_total = _get_or_create_counter(
    "catalog_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = _get_or_create_histogram(
    "catalog_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

http_requests_in_progress = _get_or_create_gauge(
    "catalog_http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method"],
)
