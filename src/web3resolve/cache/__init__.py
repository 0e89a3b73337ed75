"""In-memory caching layer."""

from .client import CacheStats, ResolutionCache

__all__ = [
    "CacheStats",
    "ResolutionCache",
]
