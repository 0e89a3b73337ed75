"""Classification of identifiers into addresses, ENS names and Base names."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from web3resolve.core.normalization import normalize_input
from web3resolve.core.types import InputType, Platform

ADDRESS_PATTERN: re.Pattern[str] = re.compile(r"0x[0-9a-fA-F]{40}")
ENS_SUFFIX = ".eth"
BASENAME_SUFFIX = ".base.eth"


def is_ethereum_address(value: str) -> bool:
    """Check for ``0x`` followed by exactly 40 hex characters (any case)."""
    return ADDRESS_PATTERN.fullmatch(value) is not None


def is_base_name(value: str) -> bool:
    return value.endswith(BASENAME_SUFFIX)


def is_ens_name(value: str) -> bool:
    """ENS names end in ``.eth`` but are not in the Base sub-namespace."""
    return value.endswith(ENS_SUFFIX) and not is_base_name(value)


@dataclass(frozen=True)
class DetectionResult:
    """Result of identifier classification."""

    input_type: InputType
    normalized_value: str

    @property
    def platform(self) -> Platform | None:
        """Platform a successful resolution of this input is attributed to."""
        match self.input_type:
            case InputType.ADDRESS:
                return Platform.ETHEREUM
            case InputType.BASENAME:
                return Platform.BASENAMES
            case InputType.ENS:
                return Platform.ENS
            case _:
                return None

    @property
    def needs_lookup(self) -> bool:
        """Whether resolving this input requires the upstream provider."""
        return self.input_type in (InputType.ENS, InputType.BASENAME)

    def __repr__(self) -> str:
        return f"DetectionResult(type={self.input_type.value}, value={self.normalized_value!r})"


class IdentifierDetector:
    """
    Classifies identifiers.

    Pure and deterministic: no network access and no state. ``classify``
    expects an already-normalized value; ``detect`` normalizes first.
    """

    # Checked in order; Base names must win over plain ENS.
    CHECKS: ClassVar[tuple[tuple[InputType, Callable[[str], bool]], ...]] = (
        (InputType.ADDRESS, is_ethereum_address),
        (InputType.BASENAME, is_base_name),
        (InputType.ENS, is_ens_name),
    )

    def classify(self, value: str) -> InputType:
        for input_type, check in self.CHECKS:
            if check(value):
                return input_type
        return InputType.UNKNOWN

    def detect(self, query: str) -> DetectionResult:
        """Normalize and classify a raw query string."""
        normalized = normalize_input(query)
        return DetectionResult(
            input_type=self.classify(normalized),
            normalized_value=normalized,
        )
