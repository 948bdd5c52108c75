"""Tests for the Razorpay gateway client."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from resume_ai_core.exceptions import PaymentGatewayError
from resume_ai_core.models.payment import OrderNotes, OrderSpec
from resume_ai_services.tools.razorpay_client import RazorpayClient

BASE_URL = "https://api.razorpay.test/v1"


def _make_spec() -> OrderSpec:
    """Create a valid order spec."""
    return OrderSpec(
        amount=50000,
        currency="INR",
        receipt="receipt_resume_r1",
        notes=OrderNotes(resumeId="r1", userId="u1"),
    )


def _make_http(response: MagicMock | None = None) -> AsyncMock:
    """Create a mock httpx.AsyncClient usable as an async context manager."""
    mock_http = AsyncMock()
    mock_http.post.return_value = response
    mock_http.__aenter__ = AsyncMock(return_value=mock_http)
    mock_http.__aexit__ = AsyncMock(return_value=None)
    return mock_http


def _make_response(payload: object) -> MagicMock:
    """Create a successful mock response with a JSON body."""
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = MagicMock()
    return mock_response


@pytest.mark.unit
class TestRazorpayClient:
    """Test order minting over the Razorpay REST API."""

    @pytest.mark.asyncio
    async def test_mint_order_success(self) -> None:
        """A created order is parsed and the request is authenticated."""
        client = RazorpayClient("rzp_id", "rzp_secret", base_url=BASE_URL, timeout=5.0)
        response = _make_response(
            {
                "id": "order_ABC",
                "entity": "order",
                "amount": 50000,
                "currency": "INR",
                "receipt": "receipt_resume_r1",
                "status": "created",
                "notes": {"resumeId": "r1", "userId": "u1"},
            }
        )
        mock_http = _make_http(response)

        with patch("httpx.AsyncClient", return_value=mock_http) as mock_cls:
            order = await client.mint_order(_make_spec())

        assert order is not None
        assert order.id == "order_ABC"
        assert order.model_dump()["entity"] == "order"
        assert mock_cls.call_args.kwargs["auth"] == ("rzp_id", "rzp_secret")
        assert mock_cls.call_args.kwargs["timeout"] == 5.0
        url = mock_http.post.call_args.args[0]
        assert url == f"{BASE_URL}/orders"
        body = mock_http.post.call_args.kwargs["json"]
        assert body["amount"] == 50000
        assert body["notes"] == {"resumeId": "r1", "userId": "u1"}

    @pytest.mark.asyncio
    async def test_mint_order_empty_body(self) -> None:
        """A body without an order ID yields None."""
        client = RazorpayClient("rzp_id", "rzp_secret", base_url=BASE_URL)
        with patch("httpx.AsyncClient", return_value=_make_http(_make_response({}))):
            assert await client.mint_order(_make_spec()) is None

    @pytest.mark.asyncio
    async def test_mint_order_rejected(self) -> None:
        """HTTP error statuses become PaymentGatewayError."""
        client = RazorpayClient("rzp_id", "rzp_secret", base_url=BASE_URL)
        request = httpx.Request("POST", f"{BASE_URL}/orders")
        response = _make_response({})
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "bad request", request=request, response=httpx.Response(400, request=request)
        )

        with patch("httpx.AsyncClient", return_value=_make_http(response)):
            with pytest.raises(PaymentGatewayError):
                await client.mint_order(_make_spec())

    @pytest.mark.asyncio
    async def test_mint_order_network_error(self) -> None:
        """Transport failures become PaymentGatewayError."""
        client = RazorpayClient("rzp_id", "rzp_secret", base_url=BASE_URL)
        mock_http = _make_http()
        mock_http.post.side_effect = httpx.ConnectError("unreachable")

        with patch("httpx.AsyncClient", return_value=mock_http):
            with pytest.raises(PaymentGatewayError, match="Something went wrong"):
                await client.mint_order(_make_spec())

    @pytest.mark.asyncio
    async def test_mint_order_invalid_json(self) -> None:
        """A non-JSON body becomes PaymentGatewayError."""
        client = RazorpayClient("rzp_id", "rzp_secret", base_url=BASE_URL)
        response = _make_response(None)
        response.json.side_effect = ValueError("not json")

        with patch("httpx.AsyncClient", return_value=_make_http(response)):
            with pytest.raises(PaymentGatewayError):
                await client.mint_order(_make_spec())

    def test_base_url_trailing_slash(self) -> None:
        """A trailing slash on the base URL is ignored."""
        client = RazorpayClient("rzp_id", "rzp_secret", base_url=f"{BASE_URL}/")
        assert client._base_url == BASE_URL
