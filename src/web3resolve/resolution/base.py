"""Abstract base resolver with HTTP client management and tagged fetch results."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from web3resolve.core.exceptions import ResolverUnavailableError
from web3resolve.core.models import ProviderRecord
from web3resolve.core.types import ResolutionStatus, SourceName

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 30
DEFAULT_CACHE_MAX_SIZE = 1000
DEFAULT_CACHE_TTL_MS = 15 * 60 * 1000


class ResolverConfig(BaseModel):
    """
    Configuration for name resolution.

    Immutable; updates produce a new instance (see ``ResolutionEngine.configure``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str | None = Field(default=None, description="Provider API key, sent when non-empty")
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, gt=0, description="Max names per batch call")
    cache_max_size: int = Field(default=DEFAULT_CACHE_MAX_SIZE, gt=0, description="Max cached entries")
    cache_ttl_ms: int = Field(default=DEFAULT_CACHE_TTL_MS, ge=0, description="Entry lifetime (ms)")
    base_url: str | None = Field(default=None, description="Override the provider base URL")
    timeout: float | None = Field(default=30.0, gt=0, description="Per-request timeout (s)")


class FetchResult(BaseModel):
    """
    Tagged outcome of an upstream lookup.

    Callers that only care about the public contract treat any status other
    than ``SUCCESS`` as "absent"; the status and message are kept for logging.
    """

    status: ResolutionStatus
    records: list[ProviderRecord] = Field(default_factory=list)
    error_message: str | None = None
    source: SourceName
    status_code: int | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS

    @property
    def record(self) -> ProviderRecord | None:
        """First record, when the lookup succeeded."""
        if self.success and self.records:
            return self.records[0]
        return None


class AbstractResolver(ABC):
    """
    Abstract base class for upstream resolution providers.

    Provides:
    - HTTP client management with connection pooling
    - Per-request auth headers read from the current config
    - Conversion of transport errors into ResolverUnavailableError
    """

    SOURCE_NAME: ClassVar[SourceName]
    BASE_URL: ClassVar[str]

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()
        self._client: httpx.AsyncClient | None = None
        self._client_settings: tuple[str, float | None] | None = None

    @property
    def source_name(self) -> SourceName:
        return self.SOURCE_NAME

    @property
    def base_url(self) -> str:
        return self.config.base_url or self.BASE_URL

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        settings = (self.base_url, self.config.timeout)
        if self._client is not None and self._client_settings != settings:
            # Config changed since the client was built
            await self.close()

        if self._client is None or self._client.is_closed:
            self._client_settings = settings
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise ResolverUnavailableError(
                message=f"HTTP error: {e!r}",
                source=self.source_name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": "web3resolve/0.1",
            "Accept": "application/json",
        }

    def _get_auth_headers(self) -> dict[str, str]:
        """Headers carrying credentials. Override to add auth."""
        return {}

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request, raising ResolverUnavailableError on transport failure."""
        start = time.monotonic()
        headers = {**self._get_auth_headers(), **kwargs.pop("headers", {})}

        async with self._get_client() as client:
            response = await client.request(method, url, headers=headers, **kwargs)

        duration_ms = (time.monotonic() - start) * 1000
        logger.debug(
            f"{self.source_name} {method} {url} -> {response.status_code} ({duration_ms:.0f}ms)"
        )
        return response

    @abstractmethod
    async def fetch_single(self, identifier: str) -> FetchResult:
        """
        Look up one identifier.

        Returns:
            FetchResult whose ``record`` is the matching provider record
        """
        ...

    @abstractmethod
    async def fetch_batch(self, identifiers: list[str]) -> FetchResult:
        """
        Look up several identifiers in one request.

        Returns:
            FetchResult carrying every record the provider returned
        """
        ...

    async def __aenter__(self) -> "AbstractResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
