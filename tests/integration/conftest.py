"""Integration test fixtures for the ASGI application."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from quotesync.api.app import create_app
from quotesync.api.dependencies import get_sync_service
from quotesync.core.exceptions import FetchError, StoreError
from quotesync.core.models import SyncOutcome


class StubSyncService:
    """Sync service stand-in returning a fixed outcome or raising an error."""

    def __init__(self) -> None:
        self.error: Exception | None = None
        self.runs = 0

    async def run(self) -> SyncOutcome:
        self.runs += 1
        if self.error is not None:
            raise self.error
        return SyncOutcome(authors_processed=1, authors_created=1)


class StubKV:
    """Redis client stand-in for health checks."""

    def __init__(self, healthy: bool = True) -> None:
        self.healthy = healthy

    async def ping(self) -> bool:
        if not self.healthy:
            raise StoreError("Redis PING failed: connection refused")
        return True


@pytest.fixture
def sync_service() -> StubSyncService:
    return StubSyncService()


@pytest.fixture
def fetch_error() -> FetchError:
    return FetchError("Error fetching quotes.json: 500", status_code=500)


@pytest.fixture
def test_app(sync_service: StubSyncService) -> FastAPI:
    """Create the application with the sync service overridden."""
    app = create_app()
    app.dependency_overrides[get_sync_service] = lambda: sync_service
    return app


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_kv():
    """Factory for Redis client stand-ins."""
    return StubKV
