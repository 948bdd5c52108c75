"""Domain models for resume-ai-gateway."""

from resume_ai_core.models.payment import (
    Order,
    OrderNotes,
    OrderSpec,
    PaymentProof,
    PaymentReceipt,
)
from resume_ai_core.models.resume import (
    AnalysisFeedback,
    Education,
    Experience,
    PersonalInfo,
    Project,
    Resume,
    ResumeAnalysis,
    ResumeContent,
)

__all__ = [
    "AnalysisFeedback",
    "Education",
    "Experience",
    "Order",
    "OrderNotes",
    "OrderSpec",
    "PaymentProof",
    "PaymentReceipt",
    "PersonalInfo",
    "Project",
    "Resume",
    "ResumeAnalysis",
    "ResumeContent",
]
