"""Payment gateway order and verification models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OrderNotes(BaseModel):
    """Metadata attached to an order, linking it back to a resume and owner."""

    resumeId: str = Field(description="Resume the order unlocks")  # noqa: N815
    userId: str = Field(description="Requester who asked for the order")  # noqa: N815


class OrderSpec(BaseModel):
    """Request sent to the payment gateway to mint an order."""

    amount: int = Field(gt=0, description="Amount in the smallest currency unit")
    currency: str = Field(description="ISO currency code")
    receipt: str = Field(description="Receipt label derived from the resume ID")
    notes: OrderNotes = Field(description="Reconciliation metadata")


class Order(BaseModel):
    """Order returned by the payment gateway and forwarded to the caller.

    Extra gateway fields (``entity``, ``created_at``, ...) are preserved so
    the client-side checkout receives the order unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Gateway order identifier")
    amount: int = Field(description="Amount in the smallest currency unit")
    currency: str = Field(description="ISO currency code")
    receipt: str | None = Field(default=None, description="Receipt label")
    status: str | None = Field(default=None, description="Gateway order status")
    notes: dict[str, str] | list[str] = Field(
        default_factory=dict, description="Metadata echoed by the gateway"
    )


class PaymentProof(BaseModel):
    """Gateway-issued proof of payment; never stored."""

    order_id: str
    payment_id: str
    signature: str


class PaymentReceipt(BaseModel):
    """Caller-facing confirmation of a verified payment."""

    message: str
    order_id: str
    payment_id: str
