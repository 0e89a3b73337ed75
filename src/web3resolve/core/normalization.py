"""Normalization helpers shared by the classifier, cache and engine."""


def normalize_input(value: str) -> str:
    """
    Normalize a raw identifier for classification and cache lookup.

    Leading/trailing whitespace is stripped and the result lowercased, so
    "  Alice.ETH " and "alice.eth" share one cache entry.
    """
    return value.strip().lower()


def normalize_address(address: str) -> str:
    """Lowercase a hex address (drops EIP-55 checksum casing)."""
    return address.strip().lower()
