"""web3resolve - Cached, batched resolution of ENS names, Base names and addresses."""

from web3resolve.cache.client import CacheStats, ResolutionCache
from web3resolve.client import resolve_name, resolve_names
from web3resolve.core.models import ResolutionResult
from web3resolve.core.types import InputType, Platform, ResolutionStatus
from web3resolve.detection.identifier import DetectionResult, IdentifierDetector
from web3resolve.resolution.base import ResolverConfig
from web3resolve.resolution.engine import ResolutionEngine

__version__ = "0.1.0"
__all__ = [
    # Engine
    "ResolutionEngine",
    "ResolverConfig",
    "resolve_name",
    "resolve_names",
    # Types
    "InputType",
    "Platform",
    "ResolutionStatus",
    # Models
    "CacheStats",
    "DetectionResult",
    "IdentifierDetector",
    "ResolutionCache",
    "ResolutionResult",
    # Version
    "__version__",
]
