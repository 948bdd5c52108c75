"""Rewrites professional summaries and job descriptions."""

from __future__ import annotations

import time

from resume_ai_core.exceptions import InputValidationError
from resume_ai_services.ai.base import BaseAIService
from resume_ai_services.prompts.enhancer import (
    JOB_DESC_ENHANCER_SYSTEM,
    SUMMARY_ENHANCER_SYSTEM,
)


class ResumeEnhancer(BaseAIService):
    """Rewrite short resume passages to be concise and ATS-friendly."""

    service_name = "resume_enhancer"

    async def enhance_summary(self, user_content: str | None) -> str:
        """Return an enhanced professional summary."""
        return await self._enhance(SUMMARY_ENHANCER_SYSTEM, user_content, "summary")

    async def enhance_job_description(self, user_content: str | None) -> str:
        """Return an enhanced job description."""
        return await self._enhance(JOB_DESC_ENHANCER_SYSTEM, user_content, "job_description")

    async def _enhance(self, system: str, user_content: str | None, kind: str) -> str:
        if not user_content or not user_content.strip():
            raise InputValidationError

        self._log_start({"kind": kind, "input_chars": len(user_content)})
        start = time.monotonic()
        enhanced = await self._llm.complete(
            system, user_content, model=self.settings.text_model
        )
        self._log_end(time.monotonic() - start, {"kind": kind, "output_chars": len(enhanced)})
        return enhanced
