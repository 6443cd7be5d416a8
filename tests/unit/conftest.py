"""Unit test fixtures with HTTP mocking and an in-memory store."""

from __future__ import annotations

import pytest
import respx

from quotesync.core.exceptions import StoreError
from quotesync.core.models import QuoteDataset
from quotesync.store.records import AuthorRecordStore


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Fakes
# ============================================================================


class InMemoryKV:
    """Dict-backed stand-in for AsyncRedisClient."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.reads: list[str] = []
        self.writes: list[str] = []
        self.fail_on_set: str | None = None

    async def get(self, key: str) -> str | None:
        self.reads.append(key)
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        if key == self.fail_on_set:
            raise StoreError("Redis SET failed: connection reset", key=key)
        self.writes.append(key)
        self.data[key] = value

    async def ping(self) -> bool:
        return True


class FakeFetcher:
    """Returns a fixed dataset, or raises a fixed error."""

    def __init__(self, dataset: QuoteDataset | None = None, error: Exception | None = None):
        self.dataset = dataset
        self.error = error
        self.calls = 0

    async def fetch(self) -> QuoteDataset:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.dataset


class FakeImageResolver:
    """Maps display names to URLs (or errors) and records every call."""

    def __init__(self, results: dict[str, object] | None = None) -> None:
        self.results = results or {}
        self.calls: list[str] = []

    async def resolve(self, display_name: str) -> str | None:
        self.calls.append(display_name)
        result = self.results.get(display_name)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def kv() -> InMemoryKV:
    return InMemoryKV()


@pytest.fixture
def record_store(kv: InMemoryKV) -> AuthorRecordStore:
    return AuthorRecordStore(kv)


@pytest.fixture
def image_resolver() -> FakeImageResolver:
    return FakeImageResolver()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def make_fetcher():
    """Factory for fetchers with a custom dataset or error."""
    return FakeFetcher


@pytest.fixture
def make_image_resolver():
    """Factory for image resolvers with preset results."""
    return FakeImageResolver
