"""Base AI service with LLM access and timing logs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from resume_ai_core.config.settings import Settings
    from resume_ai_core.interfaces.llm import LLMClient

logger = structlog.get_logger()


class BaseAIService:
    """Shared plumbing for services that call the LLM."""

    service_name: str = "base"

    def __init__(self, settings: Settings, llm: LLMClient) -> None:
        """Initialize with settings and an LLM client."""
        self.settings = settings
        self._llm = llm

    def _log_start(self, context: dict[str, object] | None = None) -> None:
        """Log service call start."""
        logger.info(
            "ai_service_start",
            service=self.service_name,
            **(context or {}),
        )

    def _log_end(
        self, duration: float, context: dict[str, object] | None = None
    ) -> None:
        """Log service call end with duration."""
        logger.info(
            "ai_service_end",
            service=self.service_name,
            duration_seconds=round(duration, 2),
            **(context or {}),
        )
