"""Abstract resume store interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from resume_ai_core.models.resume import Resume, ResumeContent


@runtime_checkable
class ResumeStore(Protocol):
    """Abstract repository for resume documents."""

    async def get_owned(self, resume_id: str, user_id: str) -> Resume | None:
        """Return the resume only if it exists and belongs to ``user_id``."""
        ...

    async def create(self, user_id: str, title: str, content: ResumeContent) -> Resume:
        """Persist a new resume for ``user_id``."""
        ...

    async def mark_analysis_purchased(self, resume_id: str, user_id: str) -> bool:
        """Flip the entitlement flag false->true; return whether a row changed."""
        ...
