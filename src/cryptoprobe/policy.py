"""Cipher key-length policy queries for cryptoprobe.

The default policy asks the ``cryptography`` OpenSSL backend which key sizes
it will actually accept for a block cipher. The largest accepted size is the
maximum allowed key length for that algorithm.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.decrepit.ciphers import algorithms as decrepit_algorithms
from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm, Cipher, algorithms, modes

from .errors import AlgorithmUnsupportedError

# Algorithm names (upper-cased) to class names in cryptography's algorithm modules
BLOCK_CIPHERS = {
    "AES": "AES",
    "CAMELLIA": "Camellia",
    "SM4": "SM4",
}


class CipherPolicy(Protocol):
    """Source of maximum allowed key lengths per algorithm."""

    def max_allowed_key_length(self, algorithm: str) -> int:
        """Return the maximum allowed key length in bits.

        Raises:
            AlgorithmUnsupportedError: If the algorithm is not recognized.
        """
        ...


class BackendCipherPolicy:
    """Cipher policy derived from the installed cryptography backend."""

    def max_allowed_key_length(self, algorithm: str) -> int:
        """Query the backend for the largest usable key size.

        Key sizes declared by the algorithm are tried largest first by
        creating an ECB encryptor with an all-zero key.

        Args:
            algorithm: Algorithm name, matched case-insensitively.

        Returns:
            The largest key size in bits the backend accepts.

        Raises:
            AlgorithmUnsupportedError: If the name is unknown or the backend
                accepts none of its key sizes.
        """
        cipher_class = _lookup_cipher(algorithm)

        for key_size in sorted(cipher_class.key_sizes, reverse=True):
            if _backend_accepts(cipher_class, key_size):
                return key_size

        raise AlgorithmUnsupportedError(algorithm, "no key size is supported by this backend")


class StaticCipherPolicy:
    """Cipher policy answered from a fixed table.

    Attributes:
        limits: Maximum key length in bits per algorithm name.
    """

    def __init__(self, limits: Mapping[str, int]) -> None:
        self.limits = {name.upper(): length for name, length in limits.items()}

    def max_allowed_key_length(self, algorithm: str) -> int:
        try:
            return self.limits[algorithm.upper()]
        except KeyError as e:
            raise AlgorithmUnsupportedError(algorithm, "not present in policy table") from e


def _lookup_cipher(algorithm: str) -> type[BlockCipherAlgorithm]:
    attr = BLOCK_CIPHERS.get(algorithm.upper())
    cipher_class = None
    if attr:
        # Deprecated ciphers live in the decrepit module; the primary alias warns
        cipher_class = getattr(decrepit_algorithms, attr, None) or getattr(algorithms, attr, None)
    if cipher_class is None:
        raise AlgorithmUnsupportedError(algorithm, "unknown algorithm name")
    return cipher_class


def _backend_accepts(cipher_class: type[BlockCipherAlgorithm], key_size: int) -> bool:
    try:
        cipher = Cipher(cipher_class(bytes(key_size // 8)), modes.ECB())
        cipher.encryptor()
    except (UnsupportedAlgorithm, ValueError):
        return False
    return True
