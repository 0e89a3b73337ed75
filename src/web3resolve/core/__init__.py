"""Core types, models, and utilities."""

from .exceptions import (
    ConfigurationError,
    MalformedResponseError,
    ResolutionError,
    ResolverUnavailableError,
    Web3ResolveError,
)
from .models import ProviderRecord, ResolutionResult
from .normalization import normalize_address, normalize_input
from .types import InputType, Platform, ResolutionStatus, SourceName

__all__ = [
    # Types
    "InputType",
    "Platform",
    "ResolutionStatus",
    "SourceName",
    # Models
    "ProviderRecord",
    "ResolutionResult",
    # Normalization
    "normalize_address",
    "normalize_input",
    # Exceptions
    "ConfigurationError",
    "MalformedResponseError",
    "ResolutionError",
    "ResolverUnavailableError",
    "Web3ResolveError",
]
