"""Integration tests for application startup."""

from __future__ import annotations

import importlib

import pytest

from quotesync.api.app import create_app, lifespan
from quotesync.config import QuotesyncSettings
from quotesync.core.exceptions import ConfigurationError

pytestmark = [pytest.mark.integration]


class TestLifespan:
    """Tests for the application lifespan."""

    async def test_missing_credentials_fail_before_redis_is_opened(
        self, monkeypatch, mock_settings_minimal: QuotesyncSettings
    ):
        app_module = importlib.import_module("quotesync.api.app")
        monkeypatch.setattr(app_module, "get_settings", lambda: mock_settings_minimal)
        app = create_app()

        with pytest.raises(ConfigurationError):
            async with lifespan(app):
                pass

        assert not hasattr(app.state, "kv_client")
