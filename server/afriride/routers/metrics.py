"""Prometheus scrape endpoint for booking, inquiry and lookup counters."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST

from ..core.observability import get_prometheus_metrics

router = APIRouter(tags=["Observability"])


@router.get(
    "/metrics",
    summary="Prometheus Metrics",
    description="Request, booking, inquiry, lookup and catalog counters in Prometheus text format",
    response_class=Response,
)
async def metrics():
    """Return the service's own registry; no request bodies or customer data are exported."""
    return Response(
        content=get_prometheus_metrics(),
        media_type=CONTENT_TYPE_LATEST,
    )
