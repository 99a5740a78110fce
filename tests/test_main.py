"""Tests for the command-line startup gate."""

import json
from unittest.mock import patch

import pytest

from cryptoprobe import SecurityVerifier, StaticCipherPolicy
from cryptoprobe.__main__ import main


class TestMain:
    """Tests for the main entry point."""

    def test_secure_host_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a secure host prints a JSON summary and exits 0."""
        verifier = SecurityVerifier(provider="json", policy=StaticCipherPolicy({"AES": 256}))

        with patch("cryptoprobe.__main__.SecurityVerifier", return_value=verifier):
            assert main() == 0

        output = json.loads(capsys.readouterr().out)
        assert output == {
            "secure": True,
            "provider": "json",
            "algorithm": "AES",
            "minimumKeyLength": 128,
        }

    def test_missing_provider_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a failed check prints the message to stderr and exits 1."""
        verifier = SecurityVerifier(provider="nonexistent_provider")

        with patch("cryptoprobe.__main__.SecurityVerifier", return_value=verifier):
            assert main() == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "alternate provider missing" in captured.err

    def test_capped_policy_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a key-length failure is reported on stderr."""
        verifier = SecurityVerifier(provider="json", policy=StaticCipherPolicy({"AES": 128}))

        with patch("cryptoprobe.__main__.SecurityVerifier", return_value=verifier):
            assert main() == 1

        assert "key-length policy insufficient" in capsys.readouterr().err
