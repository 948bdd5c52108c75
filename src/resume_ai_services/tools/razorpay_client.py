"""Razorpay payment gateway client."""

from __future__ import annotations

import httpx
import structlog

from resume_ai_core.exceptions import PaymentGatewayError
from resume_ai_core.models.payment import Order, OrderSpec

logger = structlog.get_logger()

RAZORPAY_ORDERS_PATH = "/orders"


class RazorpayClient:
    """PaymentGateway implementation over the Razorpay Orders REST API."""

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        base_url: str = "https://api.razorpay.com/v1",
        timeout: float = 20.0,
    ) -> None:
        """Initialize with API credentials and endpoint settings."""
        self._auth = (key_id, key_secret)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def mint_order(self, spec: OrderSpec) -> Order | None:
        """Create an order; return None when the gateway returns no order."""
        url = f"{self._base_url}{RAZORPAY_ORDERS_PATH}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, auth=self._auth) as client:
                response = await client.post(url, json=spec.model_dump())
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "razorpay_order_rejected",
                status_code=exc.response.status_code,
                receipt=spec.receipt,
            )
            raise PaymentGatewayError from exc
        except httpx.HTTPError as exc:
            logger.error(
                "razorpay_request_failed",
                error_type=type(exc).__name__,
                receipt=spec.receipt,
            )
            raise PaymentGatewayError from exc
        except ValueError as exc:
            logger.error("razorpay_invalid_response", receipt=spec.receipt)
            raise PaymentGatewayError from exc

        if not isinstance(data, dict) or not data.get("id"):
            logger.warning("razorpay_empty_order", receipt=spec.receipt)
            return None
        return Order.model_validate(data)
