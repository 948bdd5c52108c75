"""Order issuance for the paid resume analysis."""

from __future__ import annotations

import structlog

from resume_ai_core.constants import (
    DEFAULT_CURRENCY,
    MISSING_ORDER_FIELDS_MESSAGE,
    RECEIPT_PREFIX,
)
from resume_ai_core.exceptions import (
    AnalysisAlreadyPurchasedError,
    InputValidationError,
    PaymentGatewayError,
    ResumeNotFoundError,
)
from resume_ai_core.interfaces.payment_gateway import PaymentGateway
from resume_ai_core.interfaces.repository import ResumeStore
from resume_ai_core.models.payment import Order, OrderNotes, OrderSpec

logger = structlog.get_logger()


class OrderIssuer:
    """Mint a gateway order that, once paid, unlocks a resume's analysis.

    Nothing is persisted here; the order is a pass-through value from the
    gateway. Two concurrent requests for the same unpurchased resume may
    both mint an order.
    """

    def __init__(
        self,
        store: ResumeStore,
        gateway: PaymentGateway,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize with a resume store, gateway, and order currency."""
        self._store = store
        self._gateway = gateway
        self._currency = currency

    async def issue_order(
        self,
        resume_id: str | None,
        amount: int | None,
        requester_id: str,
    ) -> Order:
        """Validate ownership and purchase state, then mint an order."""
        if not resume_id or not _is_positive_int(amount):
            raise InputValidationError(MISSING_ORDER_FIELDS_MESSAGE)

        resume = await self._store.get_owned(resume_id, requester_id)
        if resume is None:
            raise ResumeNotFoundError
        if resume.analysis_purchased:
            raise AnalysisAlreadyPurchasedError

        spec = OrderSpec(
            amount=amount,  # type: ignore[arg-type]
            currency=self._currency,
            receipt=f"{RECEIPT_PREFIX}{resume_id}",
            notes=OrderNotes(resumeId=str(resume_id), userId=str(requester_id)),
        )
        order = await self._gateway.mint_order(spec)
        if order is None:
            logger.error("order_not_created", resume_id=resume_id)
            raise PaymentGatewayError

        logger.info(
            "order_issued",
            resume_id=resume_id,
            order_id=order.id,
            amount=order.amount,
            currency=order.currency,
        )
        return order


def _is_positive_int(value: object) -> bool:
    """Return True for a positive int that is not a bool."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
