"""Scored resume feedback, gated by a purchased entitlement."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from resume_ai_core.constants import MISSING_RESUME_ID_MESSAGE
from resume_ai_core.exceptions import (
    InputValidationError,
    ResumeAIError,
    ResumeNotFoundError,
)
from resume_ai_core.models.resume import Resume, ResumeAnalysis
from resume_ai_services.ai.base import BaseAIService
from resume_ai_services.payments.entitlement import require_entitlement
from resume_ai_services.prompts.analyzer import (
    RESUME_ANALYZER_SYSTEM,
    RESUME_ANALYZER_USER,
    RESUME_TEXT_TEMPLATE,
)

if TYPE_CHECKING:
    from resume_ai_core.config.settings import Settings
    from resume_ai_core.interfaces.llm import LLMClient
    from resume_ai_core.interfaces.repository import ResumeStore

logger = structlog.get_logger()


def render_resume_text(resume: Resume) -> str:
    """Flatten a stored resume into the plain-text form sent for analysis."""
    return RESUME_TEXT_TEMPLATE.format(
        summary=resume.professional_summary,
        skills=", ".join(resume.skills),
        experience="; ".join(
            f"{exp.position} at {exp.company}: {exp.description}"
            for exp in resume.experience
        ),
        education="; ".join(
            f"{edu.degree} from {edu.institution}" for edu in resume.education
        ),
        projects="; ".join(f"{p.name}: {p.description}" for p in resume.project),
    )


class ResumeAnalyzer(BaseAIService):
    """Score a resume and give per-criterion feedback."""

    service_name = "resume_analyzer"

    def __init__(self, settings: Settings, llm: LLMClient, store: ResumeStore) -> None:
        """Initialize with settings, an LLM client, and a resume store."""
        super().__init__(settings, llm)
        self._store = store

    async def analyze(self, resume_id: str | None, requester_id: str) -> ResumeAnalysis:
        """Return the analysis for an owned, purchased resume.

        The entitlement is checked before the LLM is called.
        """
        if not resume_id:
            raise InputValidationError(MISSING_RESUME_ID_MESSAGE)

        resume = await self._store.get_owned(resume_id, requester_id)
        if resume is None:
            raise ResumeNotFoundError
        require_entitlement(resume)

        self._log_start({"resume_id": resume_id})
        start = time.monotonic()
        try:
            analysis = await self._llm.extract(
                RESUME_ANALYZER_SYSTEM,
                RESUME_ANALYZER_USER.format(resume_text=render_resume_text(resume)),
                model=self.settings.analysis_model,
                response_model=ResumeAnalysis,
            )
        except ResumeAIError as exc:
            logger.exception(
                "analysis_failed",
                resume_id=resume_id,
                error_type=type(exc).__name__,
            )
            raise
        self._log_end(
            time.monotonic() - start, {"resume_id": resume_id, "score": analysis.score}
        )
        return analysis
