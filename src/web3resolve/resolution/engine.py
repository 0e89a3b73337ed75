"""Resolution engine: cache, deduplicate and batch name lookups."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

from web3resolve.cache.client import CacheStats, ResolutionCache
from web3resolve.core.exceptions import ConfigurationError
from web3resolve.core.models import ProviderRecord, ResolutionResult
from web3resolve.core.normalization import normalize_address, normalize_input
from web3resolve.core.types import InputType, ResolutionStatus
from web3resolve.detection.identifier import (
    DetectionResult,
    IdentifierDetector,
    is_ethereum_address,
)
from web3resolve.resolution.base import AbstractResolver, FetchResult, ResolverConfig
from web3resolve.resolution.web3bio import Web3BioResolver

if TYPE_CHECKING:
    from web3resolve.config import Web3ResolveSettings

logger = logging.getLogger(__name__)

# Changing any of these discards the cache
CACHE_OPTIONS = frozenset({"cache_max_size", "cache_ttl_ms"})


class ResolutionEngine:
    """
    Resolves addresses, ENS names and Base names to addresses.

    Features:
    - Cache-first lookups, including cached "confirmed unresolved" results
    - Addresses and unrecognized inputs never touch the network
    - Bulk resolution with deduplication and concurrent fixed-size batches

    Upstream failures of any kind degrade to an unresolved result; no
    exception escapes ``resolve`` or ``resolve_many``. Concurrent misses on
    the same key are not coalesced and may each call the provider.

    Usage:
        async with ResolutionEngine(ResolverConfig(api_key="...")) as engine:
            result = await engine.resolve("vitalik.eth")
            results = await engine.resolve_many(["a.eth", "b.base.eth", "a.eth"])
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        resolver: AbstractResolver | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Resolver configuration. Defaults are used if not provided.
            resolver: Upstream provider. Defaults to web3.bio.
            timer: Clock (seconds) used for cache expiry.
        """
        self._config = config or ResolverConfig()
        self._resolver = resolver or Web3BioResolver(self._config)
        self._resolver.config = self._config
        self._timer = timer
        self._detector = IdentifierDetector()
        self._cache = self._build_cache()

    @classmethod
    def from_settings(cls, settings: "Web3ResolveSettings") -> "ResolutionEngine":
        """Create an engine configured from application settings."""
        return cls(settings.resolver_config())

    @property
    def cache(self) -> ResolutionCache:
        return self._cache

    @property
    def resolver(self) -> AbstractResolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def get_config(self) -> ResolverConfig:
        return self._config

    def configure(self, **changes: Any) -> ResolverConfig:
        """
        Apply a partial configuration update.

        Options not named keep their current value. Naming ``cache_max_size``
        or ``cache_ttl_ms`` rebuilds the cache, discarding every entry.

        Raises:
            ConfigurationError: An option name is not recognized
            pydantic.ValidationError: A value is out of range
        """
        unknown = set(changes) - set(ResolverConfig.model_fields)
        if unknown:
            raise ConfigurationError(
                f"Unknown resolver option(s): {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )

        self._config = ResolverConfig.model_validate({**self._config.model_dump(), **changes})
        self._resolver.config = self._config

        if changes.keys() & CACHE_OPTIONS:
            self.replace_cache()

        return self._config

    def replace_cache(self) -> None:
        """Swap in an empty cache built from the current configuration."""
        self._cache = self._build_cache()
        logger.info(
            f"Rebuilt resolution cache (max_size={self._config.cache_max_size}, "
            f"ttl_ms={self._config.cache_ttl_ms})"
        )

    def _build_cache(self) -> ResolutionCache:
        return ResolutionCache(
            self._config.cache_max_size,
            self._config.cache_ttl_ms,
            timer=self._timer,
        )

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        self._cache.clear()

    def evict(self, query: str) -> bool:
        """Drop the cached result for an input; True if one was cached."""
        return self._cache.delete(normalize_input(query))

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def detect(self, query: str) -> DetectionResult:
        return self._detector.detect(query)

    async def resolve(self, query: str) -> ResolutionResult:
        """
        Resolve a single address or name.

        Args:
            query: Address, ENS name or Base name (case and surrounding
                whitespace are ignored)

        Returns:
            The resolution result; unresolved if the input is unrecognized
            or the lookup failed for any reason
        """
        detection = self._detector.detect(query)
        key = detection.normalized_value

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key!r}")
            return cached

        if detection.needs_lookup:
            result = await self._lookup_single(detection)
        else:
            result = self._local_result(detection)

        # Unresolved results are cached too, so bad input is not retried until expiry
        self._cache.set(key, result)
        return result

    async def resolve_many(self, queries: Sequence[str]) -> list[ResolutionResult]:
        """
        Resolve many inputs using the cache and batched lookups.

        Duplicate inputs (after normalization) are looked up once and share
        the same result object. Names missing from the cache are split into
        batches of at most ``batch_size`` and fetched concurrently; a failed
        batch marks its names unresolved without affecting the others.

        Returns:
            One result per input, in input order
        """
        if not queries:
            return []

        keys = [normalize_input(query) for query in queries]
        resolved: dict[str, ResolutionResult] = {}
        pending: list[DetectionResult] = []

        for key in dict.fromkeys(keys):
            cached = self._cache.get(key)
            if cached is not None:
                resolved[key] = cached
                continue

            detection = self._detector.detect(key)
            if detection.needs_lookup:
                pending.append(detection)
                continue

            result = self._local_result(detection)
            resolved[key] = result
            self._cache.set(key, result)

        if pending:
            batches = list(self._partition(pending, self._config.batch_size))
            logger.debug(
                f"Resolving {len(pending)} name(s) in {len(batches)} batch(es) "
                f"of up to {self._config.batch_size}"
            )
            await asyncio.gather(*(self._resolve_batch(batch, resolved) for batch in batches))

        return [resolved[key] for key in keys]

    async def _resolve_batch(
        self,
        batch: list[DetectionResult],
        resolved: dict[str, ResolutionResult],
    ) -> None:
        """Resolve one batch and record every name's result."""
        for name, result in (await self._lookup_batch(batch)).items():
            resolved[name] = result
            self._cache.set(name, result)

    async def _lookup_single(self, detection: DetectionResult) -> ResolutionResult:
        name = detection.normalized_value
        try:
            fetch = await self._resolver.fetch_single(name)
        except Exception as e:
            logger.exception(f"Resolver {self._resolver.source_name} failed for {name!r}: {e}")
            return ResolutionResult.unresolved()

        self._log_failure(fetch, [name])
        return self._name_result(detection, fetch.record)

    async def _lookup_batch(self, batch: list[DetectionResult]) -> dict[str, ResolutionResult]:
        names = [detection.normalized_value for detection in batch]
        unresolved = ResolutionResult.unresolved()

        try:
            fetch = await self._resolver.fetch_batch(names)
        except Exception as e:
            logger.exception(f"Resolver {self._resolver.source_name} batch failed: {e}")
            return {name: unresolved for name in names}

        if not fetch.success:
            self._log_failure(fetch, names)
            return {name: unresolved for name in names}

        by_identity = self._correlate(fetch.records)
        return {
            detection.normalized_value: self._name_result(
                detection, by_identity.get(detection.normalized_value)
            )
            for detection in batch
        }

    @staticmethod
    def _correlate(records: list[ProviderRecord]) -> dict[str, ProviderRecord]:
        """Index records by lowercased identity, preferring ones with a usable address."""
        by_identity: dict[str, ProviderRecord] = {}
        for record in records:
            if not record.identity:
                continue
            identity = record.identity.lower()
            current = by_identity.get(identity)
            if current is None or (
                not _has_address(current) and _has_address(record)
            ):
                by_identity[identity] = record
        return by_identity

    @staticmethod
    def _local_result(detection: DetectionResult) -> ResolutionResult:
        """Result for input that resolves without the provider."""
        if detection.input_type == InputType.ADDRESS:
            return ResolutionResult(
                address=detection.normalized_value,
                platform=detection.platform,
            )
        return ResolutionResult.unresolved()

    @staticmethod
    def _name_result(
        detection: DetectionResult,
        record: ProviderRecord | None,
    ) -> ResolutionResult:
        if record is None or not _has_address(record):
            return ResolutionResult.unresolved()

        return ResolutionResult(
            address=normalize_address(record.address),
            platform=detection.platform,
            display_name=detection.normalized_value,
        )

    def _log_failure(self, fetch: FetchResult, names: list[str]) -> None:
        if fetch.success or fetch.status == ResolutionStatus.NOT_FOUND:
            return
        logger.warning(
            f"{fetch.source} lookup failed ({fetch.status}: {fetch.error_message}) "
            f"for {len(names)} name(s); caching as unresolved"
        )

    @staticmethod
    def _partition(
        items: list[DetectionResult], size: int
    ) -> Iterator[list[DetectionResult]]:
        for start in range(0, len(items), size):
            yield items[start : start + size]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        await self._resolver.close()

    async def __aenter__(self) -> ResolutionEngine:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _has_address(record: ProviderRecord) -> bool:
    return record.address is not None and is_ethereum_address(record.address.strip())
