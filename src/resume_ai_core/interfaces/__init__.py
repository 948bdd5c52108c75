"""Public interface re-exports for resume_ai_core."""

from resume_ai_core.interfaces.llm import LLMClient
from resume_ai_core.interfaces.payment_gateway import PaymentGateway
from resume_ai_core.interfaces.repository import ResumeStore

__all__ = [
    "LLMClient",
    "PaymentGateway",
    "ResumeStore",
]
