"""Error hierarchy for cryptoprobe."""

from __future__ import annotations

from .types import Check


class CryptoProbeError(Exception):
    """Base exception for all cryptoprobe errors."""

    pass


class ProviderNotFoundError(CryptoProbeError):
    """Cryptographic provider could not be resolved.

    Attributes:
        provider: The provider identifier that was looked up.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"Provider not found ({provider}): {reason}")


class AlgorithmUnsupportedError(CryptoProbeError):
    """Algorithm is not recognized by the cipher policy.

    Attributes:
        algorithm: The algorithm name that was queried.
    """

    def __init__(self, algorithm: str, reason: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Algorithm not supported ({algorithm}): {reason}")


class InsecureSystemError(CryptoProbeError):
    """Host failed the security assertion.

    Callers running a startup sequence should treat this as fatal. It is
    never raised for a recovered platform query failure, only for the
    combined assertion.

    Attributes:
        message: The failure message naming the first failed check.
        failed_checks: Every check that failed, in evaluation order.
    """

    def __init__(self, message: str, failed_checks: tuple[Check, ...]) -> None:
        self.message = message
        self.failed_checks = failed_checks
        super().__init__(message)
