"""cryptoprobe - host cryptographic capability checks.

Verifies at runtime that an alternate cryptographic provider is installed and
that the cipher key-length policy permits unlimited-strength symmetric keys.

Example:
    ```python
    from cryptoprobe import InsecureSystemError, SecurityVerifier

    try:
        SecurityVerifier().assert_secure_system()
    except InsecureSystemError as e:
        raise SystemExit(e.message)
    ```
"""

from .constants import (
    ALTERNATE_PROVIDER,
    KEY_LENGTH_INSUFFICIENT_MESSAGE,
    PROVIDER_MISSING_MESSAGE,
    UNLIMITED_KEY_LENGTH,
    UNLIMITED_STRENGTH_ALGORITHM,
    UNLIMITED_STRENGTH_MINIMUM_KEY_LENGTH,
)
from .errors import (
    AlgorithmUnsupportedError,
    CryptoProbeError,
    InsecureSystemError,
    ProviderNotFoundError,
)
from .policy import BackendCipherPolicy, CipherPolicy, StaticCipherPolicy
from .registry import ModuleProviderRegistry, ProviderRegistry, is_provider_resolvable
from .types import Check, VerificationResult
from .verifier import (
    SecurityVerifier,
    assert_secure_system,
    is_provider_installed,
    is_unlimited_strength,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SecurityVerifier",
    "assert_secure_system",
    "is_provider_installed",
    "is_unlimited_strength",
    # Collaborators
    "BackendCipherPolicy",
    "CipherPolicy",
    "StaticCipherPolicy",
    "ModuleProviderRegistry",
    "ProviderRegistry",
    "is_provider_resolvable",
    # Constants
    "ALTERNATE_PROVIDER",
    "UNLIMITED_STRENGTH_ALGORITHM",
    "UNLIMITED_STRENGTH_MINIMUM_KEY_LENGTH",
    "UNLIMITED_KEY_LENGTH",
    "PROVIDER_MISSING_MESSAGE",
    "KEY_LENGTH_INSUFFICIENT_MESSAGE",
    # Data types
    "Check",
    "VerificationResult",
    # Errors
    "CryptoProbeError",
    "ProviderNotFoundError",
    "AlgorithmUnsupportedError",
    "InsecureSystemError",
    # Version
    "__version__",
]
