"""Turns raw resume text into a stored, structured resume."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from resume_ai_core.exceptions import InputValidationError
from resume_ai_core.models.resume import Resume, ResumeContent
from resume_ai_services.ai.base import BaseAIService
from resume_ai_services.prompts.extractor import (
    RESUME_EXTRACTOR_SYSTEM,
    RESUME_EXTRACTOR_USER,
)

if TYPE_CHECKING:
    from resume_ai_core.config.settings import Settings
    from resume_ai_core.interfaces.llm import LLMClient
    from resume_ai_core.interfaces.repository import ResumeStore


class ResumeExtractor(BaseAIService):
    """Extract structured resume content and persist it for the requester."""

    service_name = "resume_extractor"

    def __init__(self, settings: Settings, llm: LLMClient, store: ResumeStore) -> None:
        """Initialize with settings, an LLM client, and a resume store."""
        super().__init__(settings, llm)
        self._store = store

    async def extract(self, resume_text: str) -> ResumeContent:
        """Ask the LLM for structured content from raw resume text."""
        return await self._llm.extract(
            RESUME_EXTRACTOR_SYSTEM,
            RESUME_EXTRACTOR_USER.format(resume_text=resume_text),
            model=self.settings.text_model,
            response_model=ResumeContent,
        )

    async def upload(
        self, resume_text: str | None, title: str | None, requester_id: str
    ) -> Resume:
        """Extract and store a new resume owned by ``requester_id``."""
        if not resume_text or not resume_text.strip():
            raise InputValidationError

        self._log_start({"input_chars": len(resume_text)})
        start = time.monotonic()
        content = await self.extract(resume_text)
        resume = await self._store.create(requester_id, title or "", content)
        self._log_end(
            time.monotonic() - start,
            {
                "resume_id": resume.id,
                "skills_count": len(content.skills),
                "experience_count": len(content.experience),
            },
        )
        return resume
