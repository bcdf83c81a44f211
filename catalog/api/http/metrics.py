"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get(
    "/metrics",
    response_class=Response,
    summary="Prometheus metrics endpoint",
    tags=["metrics"],
)
async def metrics() -> Response:
    """
    Expose Prometheus metrics for monitoring.

    Returns every registered metric in the text exposition format,
    including the read cache counters.

    Example:
        ```
        # HELP catalog_cache_hits_total Total read cache hits
        # TYPE catalog_cache_hits_total counter
        catalog_cache_hits_total{tier="memory"} 42.0
        ```
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
