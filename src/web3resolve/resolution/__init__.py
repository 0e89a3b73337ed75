"""Upstream resolvers and the resolution engine."""

from .base import AbstractResolver, FetchResult, ResolverConfig
from .engine import ResolutionEngine
from .web3bio import Web3BioResolver

__all__ = [
    "AbstractResolver",
    "FetchResult",
    "ResolutionEngine",
    "ResolverConfig",
    "Web3BioResolver",
]
