"""API request and response schemas."""

from .base import APIBaseSchema
from .requests import ConfigUpdateRequest, ResolveBatchRequest
from .responses import (
    CacheStatsResponse,
    ConfigResponse,
    DetectResponse,
    EvictResponse,
    HealthResponse,
    ResolutionResponse,
    ResolveBatchResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Requests
    "ConfigUpdateRequest",
    "ResolveBatchRequest",
    # Responses
    "CacheStatsResponse",
    "ConfigResponse",
    "DetectResponse",
    "EvictResponse",
    "HealthResponse",
    "ResolutionResponse",
    "ResolveBatchResponse",
]
