"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from quotesync.config import QuotesyncSettings
from quotesync.core.models import AuthorInput, AuthorRecord, QuoteDataset


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_author() -> AuthorInput:
    """Create a sample dataset author."""
    return AuthorInput(
        author_id=7,
        author="Ada Lovelace",
        quotes=["Q1", "Q2"],
    )


@pytest.fixture
def sample_dataset_payload() -> dict:
    """Raw JSON payload as served by the content source."""
    return {
        "authors": [
            {
                "author_id": 1,
                "author": "Maya Angelou",
                "quotes": [
                    "If you don't like something, change it.",
                    "Nothing will work unless you do.",
                ],
            },
            {
                "author_id": "twain",
                "author": "Mark Twain",
                "quotes": ["The secret of getting ahead is getting started."],
            },
        ]
    }


@pytest.fixture
def sample_dataset(sample_dataset_payload: dict) -> QuoteDataset:
    """Parsed sample dataset."""
    return QuoteDataset.model_validate(sample_dataset_payload)


@pytest.fixture
def sample_record() -> AuthorRecord:
    """A stored record that already has an image."""
    return AuthorRecord(
        author_id=7,
        author="Ada Lovelace",
        quotes=["Q1"],
        image_url="http://img/x",
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> QuotesyncSettings:
    """Create settings with every provider configured."""
    return QuotesyncSettings(
        github_token="test-github-token",
        content_repo="example/quotes",
        content_path="quotes.json",
        redis_url="redis://localhost:6379/15",
        cloudflare_account_id="test-account",
        cloudflare_images_api_token="test-cf-token",
        google_api_key="test-google-key",
        custom_search_engine_id="test-cx",
        http_timeout=5.0,
        _env_file=None,
    )


@pytest.fixture
def mock_settings_minimal() -> QuotesyncSettings:
    """Create settings with no provider credentials."""
    return QuotesyncSettings(_env_file=None)
