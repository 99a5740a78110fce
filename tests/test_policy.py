"""Tests for cipher policy module."""

import warnings

import pytest
from cryptography.hazmat.primitives.ciphers import algorithms

from cryptoprobe.constants import UNLIMITED_KEY_LENGTH
from cryptoprobe.errors import AlgorithmUnsupportedError
from cryptoprobe.policy import BackendCipherPolicy, StaticCipherPolicy, _lookup_cipher


class TestBackendCipherPolicy:
    """Tests for BackendCipherPolicy."""

    def test_aes_allows_strong_keys(self) -> None:
        """Test that the backend reports an AES key length above 128 bits."""
        maximum = BackendCipherPolicy().max_allowed_key_length("AES")

        assert maximum > 128
        assert maximum in algorithms.AES.key_sizes

    def test_name_is_case_insensitive(self) -> None:
        """Test that algorithm names match regardless of case."""
        policy = BackendCipherPolicy()

        assert policy.max_allowed_key_length("aes") == policy.max_allowed_key_length("AES")

    def test_camellia_lookup_does_not_warn(self) -> None:
        """Test that Camellia resolves without a deprecation warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            cipher_class = _lookup_cipher("camellia")

        assert cipher_class.name == "camellia"

    def test_unknown_algorithm(self) -> None:
        """Test that an unknown algorithm raises AlgorithmUnsupportedError."""
        with pytest.raises(AlgorithmUnsupportedError) as exc_info:
            BackendCipherPolicy().max_allowed_key_length("ROT13")

        assert exc_info.value.algorithm == "ROT13"
        assert "unknown algorithm name" in str(exc_info.value)

    def test_no_supported_key_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a backend accepting no key size raises AlgorithmUnsupportedError."""
        monkeypatch.setattr("cryptoprobe.policy._backend_accepts", lambda cipher_class, key_size: False)

        with pytest.raises(AlgorithmUnsupportedError, match="no key size is supported"):
            BackendCipherPolicy().max_allowed_key_length("AES")

    def test_largest_accepted_size_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that key sizes are tried largest first."""
        tried: list[int] = []

        def accepts(cipher_class, key_size):
            tried.append(key_size)
            return key_size <= 192

        monkeypatch.setattr("cryptoprobe.policy._backend_accepts", accepts)

        assert BackendCipherPolicy().max_allowed_key_length("AES") == 192
        assert tried == sorted(tried, reverse=True)
        assert tried[-1] == 192


class TestStaticCipherPolicy:
    """Tests for StaticCipherPolicy."""

    def test_returns_configured_limit(self) -> None:
        """Test that the configured limit is returned."""
        policy = StaticCipherPolicy({"AES": UNLIMITED_KEY_LENGTH})

        assert policy.max_allowed_key_length("AES") == 2147483647

    def test_name_is_case_insensitive(self) -> None:
        """Test that table lookups ignore case."""
        policy = StaticCipherPolicy({"aes": 128})

        assert policy.max_allowed_key_length("AES") == 128

    def test_missing_algorithm(self) -> None:
        """Test that a name missing from the table raises AlgorithmUnsupportedError."""
        policy = StaticCipherPolicy({"AES": 256})

        with pytest.raises(AlgorithmUnsupportedError) as exc_info:
            policy.max_allowed_key_length("Blowfish")

        assert exc_info.value.algorithm == "Blowfish"
        assert isinstance(exc_info.value.__cause__, KeyError)
