"""In-memory resolution cache with LRU eviction and per-entry expiry."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from cachetools import TTLCache

from web3resolve.core.models import ResolutionResult


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache occupancy."""

    size: int
    max_size: int


class ResolutionCache:
    """
    Bounded, time-expiring store of resolution results.

    Keys are normalized identifiers. When full, the least recently used entry
    is evicted. Independently, an entry older than ``ttl_ms`` is treated as
    absent and dropped on the next access. Capacity and TTL are fixed for the
    lifetime of the instance; build a new cache to change them.
    """

    def __init__(
        self,
        max_size: int,
        ttl_ms: int,
        *,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        if ttl_ms < 0:
            raise ValueError(f"ttl_ms must be non-negative, got {ttl_ms}")
        self._max_size = max_size
        self._ttl_ms = ttl_ms
        self._cache: TTLCache[str, ResolutionResult] = TTLCache(
            maxsize=max_size,
            ttl=ttl_ms / 1000,
            timer=timer,
        )

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    def get(self, key: str) -> ResolutionResult | None:
        """Get a live entry, refreshing its recency."""
        self._cache.expire()
        return self._cache.get(key)

    def set(self, key: str, value: ResolutionResult) -> None:
        """Insert or replace an entry; its age restarts from now."""
        self._cache[key] = value

    def delete(self, key: str) -> bool:
        """Remove an entry, returning True if a live one existed."""
        self._cache.expire()
        if key not in self._cache:
            return False
        del self._cache[key]
        return True

    def clear(self) -> None:
        self._cache.clear()

    def stats(self) -> CacheStats:
        self._cache.expire()
        return CacheStats(size=len(self._cache), max_size=self._max_size)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return self.stats().size
