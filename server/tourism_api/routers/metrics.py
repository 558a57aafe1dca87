"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST

from ..core.observability import get_prometheus_metrics

router = APIRouter(tags=["observability"])


@router.get("/metrics", response_class=Response, summary="Prometheus metrics")
async def metrics() -> Response:
    """HTTP request counters and latencies plus account, review and favorite counters."""
    return Response(content=get_prometheus_metrics(), media_type=CONTENT_TYPE_LATEST)
