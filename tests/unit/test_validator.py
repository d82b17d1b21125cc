"""Tests for webhook signature validation."""

import hashlib
import hmac

import pytest

from deploy_notifier.webhook.validator import verify_github_signature

SECRET = "test-secret-123"
PAYLOAD = b'{"deployment_status": {"state": "success"}}'


def _signature(payload: bytes, secret: str = SECRET) -> str:
    return "sha256=" + hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def test_validate_valid_signature():
    """Test that valid signatures are accepted."""
    assert verify_github_signature(PAYLOAD, _signature(PAYLOAD), SECRET) is True


def test_validate_invalid_signature():
    """Test that invalid signatures are rejected."""
    invalid_signature = "sha256=" + "a" * 64

    assert verify_github_signature(PAYLOAD, invalid_signature, SECRET) is False


def test_validate_missing_signature():
    """Test that missing signatures are rejected."""
    assert verify_github_signature(PAYLOAD, None, SECRET) is False
    assert verify_github_signature(PAYLOAD, "", SECRET) is False


def test_validate_wrong_prefix():
    """Test that signatures with wrong prefix are rejected."""
    signature = _signature(PAYLOAD).replace("sha256=", "sha1=")

    assert verify_github_signature(PAYLOAD, signature, SECRET) is False


def test_validate_wrong_secret():
    """Test that signatures made with another secret are rejected."""
    assert verify_github_signature(PAYLOAD, _signature(PAYLOAD, "other"), SECRET) is False


def test_validate_non_ascii_signature():
    """Test that garbage header values are rejected rather than raising."""
    assert verify_github_signature(PAYLOAD, "sha256=ünïcödé", SECRET) is False


@pytest.mark.parametrize("bit", [0, 7, 13, 100, len(PAYLOAD) * 8 - 1])
def test_validate_rejects_flipped_payload_bit(bit: int):
    """Test that any single-bit change to the body is rejected."""
    signature = _signature(PAYLOAD)
    mutated = bytearray(PAYLOAD)
    mutated[bit // 8] ^= 1 << (bit % 8)

    assert verify_github_signature(bytes(mutated), signature, SECRET) is False


@pytest.mark.parametrize("position", [7, 20, 70])
def test_validate_rejects_altered_signature(position: int):
    """Test that changing one hex digit of the signature is rejected."""
    signature = _signature(PAYLOAD)
    replacement = "0" if signature[position] != "0" else "1"
    altered = signature[:position] + replacement + signature[position + 1 :]

    assert verify_github_signature(PAYLOAD, altered, SECRET) is False


@pytest.mark.parametrize("secret", [None, ""])
def test_open_mode_accepts_everything(secret: str | None):
    """Test that requests are accepted when no secret is configured."""
    assert verify_github_signature(PAYLOAD, None, secret) is True
    assert verify_github_signature(PAYLOAD, "sha256=bogus", secret) is True
    assert verify_github_signature(b"", "not-a-signature", secret) is True
