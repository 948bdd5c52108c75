"""Resume repository for database operations."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from resume_ai_core.models.resume import Resume, ResumeContent
from resume_ai_infra.db.models import ResumeModel


def to_domain(model: ResumeModel) -> Resume:
    """Convert an ORM row into the domain Resume."""
    return Resume(
        id=model.id,
        user_id=model.user_id,
        title=model.title,
        professional_summary=model.professional_summary,
        skills=model.skills_json,
        personal_info=model.personal_info_json,
        experience=model.experience_json,
        project=model.project_json,
        education=model.education_json,
        analysis_purchased=model.analysis_purchased,
    )


class ResumeRepository:
    """CRUD operations for resumes, always scoped to an owner."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def get_owned(self, resume_id: str, user_id: str) -> Resume | None:
        """Retrieve a resume by ID, only if it belongs to ``user_id``."""
        stmt = (
            select(ResumeModel)
            .where(
                ResumeModel.id == resume_id,
                ResumeModel.user_id == user_id,
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return to_domain(model) if model else None

    async def create(self, user_id: str, title: str, content: ResumeContent) -> Resume:
        """Create a new, unpurchased resume."""
        model = ResumeModel(
            user_id=user_id,
            title=title,
            professional_summary=content.professional_summary,
            skills_json=list(content.skills),
            personal_info_json=content.personal_info.model_dump(),
            experience_json=[e.model_dump() for e in content.experience],
            project_json=[p.model_dump() for p in content.project],
            education_json=[e.model_dump() for e in content.education],
            analysis_purchased=False,
        )
        self._session.add(model)
        await self._session.flush()
        return to_domain(model)

    async def mark_analysis_purchased(self, resume_id: str, user_id: str) -> bool:
        """Atomically unlock the analysis.

        Issues a single conditional UPDATE so concurrent verifications cannot
        lose or reverse the flag. Returns True only for the call that
        performed the false->true transition.
        """
        stmt = (
            update(ResumeModel)
            .where(
                ResumeModel.id == resume_id,
                ResumeModel.user_id == user_id,
                ResumeModel.analysis_purchased.is_(False),
            )
            .values(analysis_purchased=True)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)
