"""Type definitions for cryptoprobe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Check(str, Enum):
    """Capability checks performed by the verifier."""

    PROVIDER = "provider"
    KEY_LENGTH = "key_length"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a single verification pass.

    Attributes:
        provider_installed: Whether the alternate provider resolved.
        unlimited_strength: Whether the key-length policy exceeds the minimum.
        failed_checks: Checks that did not pass, provider first.
    """

    provider_installed: bool
    unlimited_strength: bool
    failed_checks: tuple[Check, ...] = field(init=False)

    def __post_init__(self) -> None:
        failed: list[Check] = []
        if not self.provider_installed:
            failed.append(Check.PROVIDER)
        if not self.unlimited_strength:
            failed.append(Check.KEY_LENGTH)
        object.__setattr__(self, "failed_checks", tuple(failed))

    @property
    def secure(self) -> bool:
        """Whether every check passed."""
        return not self.failed_checks
