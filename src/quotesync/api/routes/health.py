"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from quotesync.api.schemas import HealthResponse
from quotesync.core.exceptions import StoreError

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its dependencies.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    kv_client = getattr(request.app.state, "kv_client", None)
    if kv_client is None:
        services["redis"] = "unknown"
    else:
        try:
            await kv_client.ping()
            services["redis"] = "up"
        except StoreError:
            services["redis"] = "down"
            overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version="0.1.0",
        services=services,
    )
