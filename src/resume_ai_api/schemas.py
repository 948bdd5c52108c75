"""Request and response bodies for the AI endpoints.

Request fields are optional so that the services, not the framework,
decide what "missing" means and answer with a 400 ``{message}`` body.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class EnhanceRequest(_CamelModel):
    user_content: str | None = Field(default=None, alias="userContent")


class EnhanceResponse(_CamelModel):
    enhanced_content: str = Field(serialization_alias="enhancedContent")


class UploadResumeRequest(_CamelModel):
    resume_text: str | None = Field(default=None, alias="resumeText")
    title: str | None = None


class UploadResumeResponse(_CamelModel):
    resume_id: str = Field(serialization_alias="resumeId")


class AnalyzeResumeRequest(_CamelModel):
    resume_id: str | None = Field(default=None, alias="resumeId")


class AnalyzeResumeResponse(BaseModel):
    analysis: dict[str, Any]


class CreateOrderRequest(_CamelModel):
    resume_id: str | None = Field(default=None, alias="resumeId")
    amount: int | None = Field(default=None, description="Smallest currency unit")

    @field_validator("amount", mode="before")
    @classmethod
    def drop_boolean_amount(cls, value: Any) -> Any:
        """Treat a JSON boolean as a missing amount instead of 0 or 1."""
        return None if isinstance(value, bool) else value


class VerifyPaymentRequest(_CamelModel):
    """Callback payload forwarded by the client after gateway checkout."""

    razorpay_order_id: str | None = None
    razorpay_payment_id: str | None = None
    razorpay_signature: str | None = None
    resume_id: str | None = Field(default=None, alias="resumeId")


class VerifyPaymentResponse(_CamelModel):
    message: str
    order_id: str = Field(serialization_alias="orderId")
    payment_id: str = Field(serialization_alias="paymentId")
