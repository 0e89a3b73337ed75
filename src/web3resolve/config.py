"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from web3resolve.resolution.base import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CACHE_MAX_SIZE,
    DEFAULT_CACHE_TTL_MS,
    ResolverConfig,
)


class Web3ResolveSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="WEB3RESOLVE_",
        populate_by_name=True,
    )

    # Upstream provider
    web3bio_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("WEB3RESOLVE_WEB3BIO_API_KEY", "WEB3BIO_API_KEY"),
        description="web3.bio API key (optional, raises rate limits)",
    )
    web3bio_base_url: str | None = Field(
        default=None,
        description="Override the web3.bio base URL",
    )
    request_timeout: float | None = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    # Batching and cache
    batch_size: int = Field(
        default=DEFAULT_BATCH_SIZE,
        gt=0,
        description="Maximum names per batch request",
    )
    cache_max_size: int = Field(
        default=DEFAULT_CACHE_MAX_SIZE,
        gt=0,
        description="Maximum cached resolution results",
    )
    cache_ttl_ms: int = Field(
        default=DEFAULT_CACHE_TTL_MS,
        ge=0,
        description="Cached result lifetime in milliseconds",
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
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins for the HTTP API",
    )

    def resolver_config(self) -> ResolverConfig:
        """Build the engine configuration from these settings."""
        return ResolverConfig(
            api_key=self.web3bio_api_key,
            batch_size=self.batch_size,
            cache_max_size=self.cache_max_size,
            cache_ttl_ms=self.cache_ttl_ms,
            base_url=self.web3bio_base_url,
            timeout=self.request_timeout,
        )


@lru_cache
def get_settings() -> Web3ResolveSettings:
    """Get cached settings instance."""
    return Web3ResolveSettings()
