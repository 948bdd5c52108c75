"""Gateway payment signature computation and verification."""

from __future__ import annotations

import hashlib
import hmac

from resume_ai_core.constants import SIGNATURE_SEPARATOR


def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
    """Return the hex HMAC-SHA256 of ``order_id|payment_id`` keyed by ``secret``."""
    message = f"{order_id}{SIGNATURE_SEPARATOR}{payment_id}"
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verify_signature(secret: str, order_id: str, payment_id: str, signature: str) -> bool:
    """Check a gateway signature against the expected digest in constant time.

    Only an exact match of the full hex digest is accepted.
    """
    expected = compute_signature(secret, order_id, payment_id)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
