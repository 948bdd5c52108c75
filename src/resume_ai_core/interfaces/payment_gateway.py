"""Abstract payment gateway interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from resume_ai_core.models.payment import Order, OrderSpec


@runtime_checkable
class PaymentGateway(Protocol):
    """Abstract interface for payment gateways that mint orders."""

    async def mint_order(self, spec: OrderSpec) -> Order | None:
        """Create an order at the gateway, or return None if none was created."""
        ...
