"""API response schemas."""

from __future__ import annotations

from typing import Literal

from .base import APIBaseSchema


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
