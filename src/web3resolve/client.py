"""One-off resolution helpers for callers that do not hold an engine."""

from __future__ import annotations

from collections.abc import Sequence

from web3resolve.config import Web3ResolveSettings
from web3resolve.core.models import ResolutionResult
from web3resolve.resolution.engine import ResolutionEngine


async def resolve_name(
    query: str,
    *,
    settings: Web3ResolveSettings | None = None,
) -> ResolutionResult:
    """
    Resolve one address or name (convenience function).

    Each call builds a fresh engine, so nothing is cached between calls.
    For repeated resolutions, keep a ResolutionEngine around instead.
    """
    async with ResolutionEngine.from_settings(settings or Web3ResolveSettings()) as engine:
        return await engine.resolve(query)


async def resolve_names(
    queries: Sequence[str],
    *,
    settings: Web3ResolveSettings | None = None,
) -> list[ResolutionResult]:
    """Resolve many addresses or names with batching (convenience function)."""
    async with ResolutionEngine.from_settings(settings or Web3ResolveSettings()) as engine:
        return await engine.resolve_many(queries)
