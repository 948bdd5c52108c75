"""SQLAlchemy ORM table models."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class ResumeModel(Base):
    """Resume document table."""

    __tablename__ = "resumes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    professional_summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    skills_json: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # type: ignore[type-arg]
    personal_info_json: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)  # type: ignore[type-arg]
    experience_json: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # type: ignore[type-arg]
    project_json: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # type: ignore[type-arg]
    education_json: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # type: ignore[type-arg]
    analysis_purchased: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
