"""Tests for gateway signature computation and verification."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from resume_ai_services.payments.signature import compute_signature, verify_signature

SECRET = "rzp_test_secret"


def _mutate(signature: str, index: int) -> str:
    """Change one hex character at ``index``."""
    replacement = "0" if signature[index] != "0" else "1"
    return signature[:index] + replacement + signature[index + 1 :]


@pytest.mark.unit
class TestSignature:
    """Test HMAC-SHA256 over ``order_id|payment_id``."""

    def test_matches_reference_hmac(self) -> None:
        """The digest equals a direct HMAC-SHA256 hex digest."""
        expected = hmac.new(
            SECRET.encode(), b"order_O1|pay_P1", hashlib.sha256
        ).hexdigest()
        assert compute_signature(SECRET, "order_O1", "pay_P1") == expected

    def test_accepts_exact_match(self) -> None:
        """A correct signature verifies."""
        signature = compute_signature(SECRET, "order_O1", "pay_P1")
        assert verify_signature(SECRET, "order_O1", "pay_P1", signature) is True

    @pytest.mark.parametrize("index", [0, 31, 63])
    def test_rejects_single_character_mutation(self, index: int) -> None:
        """Changing any one hex character fails verification."""
        signature = compute_signature(SECRET, "order_O1", "pay_P1")
        assert verify_signature(SECRET, "order_O1", "pay_P1", _mutate(signature, index)) is False

    def test_rejects_prefix(self) -> None:
        """A truncated digest is not accepted."""
        signature = compute_signature(SECRET, "order_O1", "pay_P1")
        assert verify_signature(SECRET, "order_O1", "pay_P1", signature[:32]) is False

    def test_rejects_other_secret(self) -> None:
        """A signature made with a different key fails."""
        signature = compute_signature("other-secret", "order_O1", "pay_P1")
        assert verify_signature(SECRET, "order_O1", "pay_P1", signature) is False

    def test_rejects_swapped_ids(self) -> None:
        """Order and payment IDs are not interchangeable."""
        signature = compute_signature(SECRET, "order_O1", "pay_P1")
        assert verify_signature(SECRET, "pay_P1", "order_O1", signature) is False

    def test_non_ascii_signature_rejected(self) -> None:
        """Arbitrary caller input is compared without raising."""
        assert verify_signature(SECRET, "order_O1", "pay_P1", "é" * 64) is False
