"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuotesyncSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="QUOTESYNC_",
    )

    # Content source (GitHub)
    github_token: str | None = Field(
        default=None,
        description="GitHub bearer token (required for private repositories)",
    )
    content_repo: str = Field(
        default="flowqi-dev/quote-uploader",
        description="Repository holding the quotes dataset, as owner/name",
    )
    content_path: str = Field(
        default="quotes.json",
        description="Path of the quotes dataset inside the repository",
    )
    content_ref: str | None = Field(
        default=None,
        description="Branch, tag or commit to read (repository default if unset)",
    )

    # Redis
    redis_url: RedisDsn = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for author records",
    )

    # Cloudflare Images
    cloudflare_account_id: str | None = Field(
        default=None,
        description="Cloudflare account identifier",
    )
    cloudflare_images_api_token: str | None = Field(
        default=None,
        description="Cloudflare Images API token",
    )

    # Google Custom Search
    google_api_key: str | None = Field(
        default=None,
        description="Google Custom Search API key",
    )
    custom_search_engine_id: str | None = Field(
        default=None,
        description="Google Programmable Search Engine identifier (cx)",
    )

    # Sync behaviour
    http_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Timeout in seconds for outbound HTTP requests",
    )
    isolate_image_failures: bool = Field(
        default=True,
        description="Keep syncing remaining authors when one author's image fails",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> QuotesyncSettings:
    """Get cached settings instance."""
    return QuotesyncSettings()
