"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from web3resolve.api.schemas.base import APIBaseSchema
from web3resolve.core.types import InputType, Platform


class ResolutionResponse(APIBaseSchema):
    """Resolution of one identifier. ``address`` is null when unresolved."""

    input: str = Field(..., description="Identifier as submitted")
    address: str | None = None
    platform: Platform | None = None
    display_name: str | None = None
    resolved: bool


class ResolveBatchResponse(APIBaseSchema):
    """Results in the same order as the submitted inputs."""

    results: list[ResolutionResponse]
    duration_ms: float


class DetectResponse(APIBaseSchema):
    """Response for input type detection."""

    query: str
    normalized_value: str
    detected_type: InputType
    platform: Platform | None = None


class CacheStatsResponse(APIBaseSchema):
    size: int
    max_size: int


class EvictResponse(APIBaseSchema):
    key: str
    evicted: bool


class ConfigResponse(APIBaseSchema):
    """Current resolver configuration. The API key itself is never returned."""

    has_api_key: bool
    batch_size: int
    cache_max_size: int
    cache_ttl_ms: int


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]] = Field(default_factory=dict)
