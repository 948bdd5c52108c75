"""Entitlement gate for paid resume analysis."""

from __future__ import annotations

from resume_ai_core.exceptions import EntitlementRequiredError
from resume_ai_core.models.resume import Resume


def require_entitlement(resume: Resume) -> None:
    """Raise EntitlementRequiredError unless the analysis has been purchased."""
    if not resume.analysis_purchased:
        raise EntitlementRequiredError
