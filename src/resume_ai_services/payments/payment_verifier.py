"""Payment callback verification and analysis unlock."""

from __future__ import annotations

import structlog

from resume_ai_core.constants import MISSING_PAYMENT_FIELDS_MESSAGE, PAYMENT_SUCCESS_MESSAGE
from resume_ai_core.exceptions import (
    InputValidationError,
    ResumeNotFoundError,
    SignatureVerificationError,
)
from resume_ai_core.interfaces.repository import ResumeStore
from resume_ai_core.models.payment import PaymentProof, PaymentReceipt
from resume_ai_services.payments.signature import verify_signature

logger = structlog.get_logger()


class PaymentVerifier:
    """Verify a gateway-signed payment proof and unlock the analysis.

    The proof is not bound to the order minted for ``resume_id``: any valid
    order/payment pair unlocks any resume owned by the requester.
    """

    def __init__(self, store: ResumeStore, key_secret: str) -> None:
        """Initialize with a resume store and the gateway's shared secret."""
        self._store = store
        self._key_secret = key_secret

    async def verify_payment(
        self,
        order_id: str | None,
        payment_id: str | None,
        signature: str | None,
        resume_id: str | None,
        requester_id: str,
    ) -> PaymentReceipt:
        """Check the signature, then flip ``analysis_purchased`` to true.

        Repeating a successful verification succeeds again without any
        further state change.
        """
        if not order_id or not payment_id or not signature or not resume_id:
            raise InputValidationError(MISSING_PAYMENT_FIELDS_MESSAGE)

        proof = PaymentProof(order_id=order_id, payment_id=payment_id, signature=signature)
        if not verify_signature(
            self._key_secret, proof.order_id, proof.payment_id, proof.signature
        ):
            logger.warning(
                "payment_signature_mismatch",
                order_id=proof.order_id,
                payment_id=proof.payment_id,
                resume_id=resume_id,
            )
            raise SignatureVerificationError

        unlocked = await self._store.mark_analysis_purchased(resume_id, requester_id)
        if not unlocked:
            resume = await self._store.get_owned(resume_id, requester_id)
            if resume is None:
                raise ResumeNotFoundError
            logger.info(
                "payment_already_applied",
                order_id=proof.order_id,
                resume_id=resume_id,
            )
        else:
            logger.info(
                "payment_verified",
                order_id=proof.order_id,
                payment_id=proof.payment_id,
                resume_id=resume_id,
            )

        return PaymentReceipt(
            message=PAYMENT_SUCCESS_MESSAGE,
            order_id=proof.order_id,
            payment_id=proof.payment_id,
        )
