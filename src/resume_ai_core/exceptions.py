"""Custom exception hierarchy for resume-ai-gateway.

Every error carries the HTTP status it maps to and a message that is safe
to show to the caller.
"""

from __future__ import annotations


class ResumeAIError(Exception):
    """Base exception for all resume-ai-gateway errors."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InputValidationError(ResumeAIError):
    """Raised when required request fields are missing or malformed."""

    status_code = 400
    default_message = "Missing required fields"


class ResumeNotFoundError(ResumeAIError):
    """Raised when a resume does not exist or is not owned by the requester."""

    status_code = 404
    default_message = "Resume not found or you do not have permission to access it."


class AnalysisAlreadyPurchasedError(ResumeAIError):
    """Raised when an order is requested for an already unlocked analysis."""

    status_code = 400
    default_message = "Analysis for this resume has already been purchased."


class SignatureVerificationError(ResumeAIError):
    """Raised when a payment callback signature does not match."""

    status_code = 400
    default_message = "Payment verification failed. Invalid signature."


class PaymentGatewayError(ResumeAIError):
    """Raised when the payment gateway fails to mint an order."""

    status_code = 500
    default_message = "Something went wrong"


class EntitlementRequiredError(ResumeAIError):
    """Raised when gated output is requested without a purchased analysis."""

    status_code = 403
    default_message = (
        "Please purchase the analysis for this resume to get the score and feedback."
    )


class AIResponseParseError(ResumeAIError):
    """Raised when structured AI output cannot be parsed or validated."""

    status_code = 500
    default_message = "Failed to parse AI response. Please try again."


class CompletionError(ResumeAIError):
    """Raised when the AI provider call itself fails."""

    status_code = 500
    default_message = "AI completion failed. Please try again."


class AuthenticationError(ResumeAIError):
    """Raised when the requester identity cannot be resolved."""

    status_code = 401
    default_message = "Not authorized"
