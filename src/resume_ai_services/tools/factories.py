"""Factory functions for creating external clients from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_ai_core.interfaces.llm import LLMClient
from resume_ai_core.interfaces.payment_gateway import PaymentGateway

if TYPE_CHECKING:
    from resume_ai_core.config.settings import Settings


def create_llm_client(settings: Settings) -> LLMClient:
    """Create the Anthropic-backed LLM client."""
    from resume_ai_services.tools.anthropic_client import AnthropicLLMClient

    return AnthropicLLMClient(
        api_key=settings.anthropic_api_key.get_secret_value(),
        max_tokens=settings.llm_max_tokens,
        max_retries=settings.llm_max_retries,
    )


def create_payment_gateway(settings: Settings) -> PaymentGateway:
    """Create the Razorpay gateway client."""
    from resume_ai_services.tools.razorpay_client import RazorpayClient

    return RazorpayClient(
        key_id=settings.razorpay_key_id,
        key_secret=settings.razorpay_key_secret.get_secret_value(),
        base_url=settings.razorpay_api_url,
        timeout=settings.gateway_timeout_seconds,
    )
