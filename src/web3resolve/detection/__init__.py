"""Identifier type detection."""

from .identifier import (
    DetectionResult,
    IdentifierDetector,
    is_base_name,
    is_ens_name,
    is_ethereum_address,
)

__all__ = [
    "DetectionResult",
    "IdentifierDetector",
    "is_base_name",
    "is_ens_name",
    "is_ethereum_address",
]
