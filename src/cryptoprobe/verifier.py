"""Host security capability verification for cryptoprobe."""

from __future__ import annotations

import logging

from .constants import (
    ALTERNATE_PROVIDER,
    KEY_LENGTH_INSUFFICIENT_MESSAGE,
    PROVIDER_MISSING_MESSAGE,
    UNLIMITED_STRENGTH_ALGORITHM,
    UNLIMITED_STRENGTH_MINIMUM_KEY_LENGTH,
)
from .errors import AlgorithmUnsupportedError, InsecureSystemError, ProviderNotFoundError
from .policy import BackendCipherPolicy, CipherPolicy
from .registry import ModuleProviderRegistry, ProviderRegistry
from .types import Check, VerificationResult

logger = logging.getLogger("cryptoprobe")


class SecurityVerifier:
    """Checks whether the host is cryptographically capable enough to run a service.

    Two independent read-only checks are performed: that the alternate
    provider is installed, and that the cipher policy allows key lengths
    above the minimum for the reference algorithm. Every call queries the
    platform afresh; nothing is cached, so instances are safe to share
    between threads.

    Example:
        ```python
        from cryptoprobe import SecurityVerifier

        SecurityVerifier().assert_secure_system()
        ```
    """

    def __init__(
        self,
        registry: ProviderRegistry | None = None,
        policy: CipherPolicy | None = None,
        *,
        provider: str = ALTERNATE_PROVIDER,
        algorithm: str = UNLIMITED_STRENGTH_ALGORITHM,
        minimum_key_length: int = UNLIMITED_STRENGTH_MINIMUM_KEY_LENGTH,
    ) -> None:
        """Initialize the verifier.

        Args:
            registry: Provider registry to query. Defaults to the import system.
            policy: Cipher policy to query. Defaults to the cryptography backend.
            provider: Identifier of the alternate provider.
            algorithm: Reference algorithm for the key-length check.
            minimum_key_length: Key length in bits the policy must exceed.
        """
        self._registry = registry if registry is not None else ModuleProviderRegistry()
        self._policy = policy if policy is not None else BackendCipherPolicy()
        self._provider = provider
        self._algorithm = algorithm
        self._minimum_key_length = minimum_key_length

    @property
    def provider(self) -> str:
        """Identifier of the alternate provider."""
        return self._provider

    @property
    def algorithm(self) -> str:
        """Reference algorithm for the key-length check."""
        return self._algorithm

    @property
    def minimum_key_length(self) -> int:
        """Key length in bits the policy must exceed."""
        return self._minimum_key_length

    def is_provider_installed(self) -> bool:
        """Look for the alternate provider without loading it.

        Returns:
            True if the provider resolves, False otherwise.
        """
        try:
            self._registry.resolve(self._provider)
        except ProviderNotFoundError as e:
            logger.error("Unable to find provider (%s) due to error: %s", self._provider, e, exc_info=True)
            return False
        return True

    def is_unlimited_strength(self) -> bool:
        """Determine whether the cipher policy allows strong keys.

        The comparison is strictly greater than the minimum: a policy capped
        at exactly the minimum is not unlimited.

        Returns:
            True if the maximum allowed key length exceeds the minimum.
        """
        try:
            maximum_key_length = self._policy.max_allowed_key_length(self._algorithm)
        except AlgorithmUnsupportedError as e:
            logger.error("Unable to query key-length policy: %s", e, exc_info=True)
            return False

        logger.debug("System maximum allowed key length (%s): %d", self._algorithm, maximum_key_length)
        return maximum_key_length > self._minimum_key_length

    def verify(self) -> VerificationResult:
        """Run both checks once.

        Returns:
            The result of each check and the list of failed checks.
        """
        return VerificationResult(
            provider_installed=self.is_provider_installed(),
            unlimited_strength=self.is_unlimited_strength(),
        )

    def assert_secure_system(self) -> None:
        """Run the security checks and fail if any of them does not pass.

        Raises:
            InsecureSystemError: If either check fails. The message names the
                provider check when both fail.
        """
        logger.info("Security Verifier : Verifying")

        result = self.verify()
        if Check.PROVIDER in result.failed_checks:
            raise InsecureSystemError(PROVIDER_MISSING_MESSAGE, result.failed_checks)
        if Check.KEY_LENGTH in result.failed_checks:
            raise InsecureSystemError(KEY_LENGTH_INSUFFICIENT_MESSAGE, result.failed_checks)


def is_provider_installed() -> bool:
    """Check for the alternate provider using the default verifier."""
    return SecurityVerifier().is_provider_installed()


def is_unlimited_strength() -> bool:
    """Check the key-length policy using the default verifier."""
    return SecurityVerifier().is_unlimited_strength()


def assert_secure_system() -> None:
    """Assert the host is secure using the default verifier."""
    SecurityVerifier().assert_secure_system()
