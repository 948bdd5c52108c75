"""Resume content, stored resume, and analysis models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from resume_ai_core.constants import MAX_ANALYSIS_SCORE, MIN_ANALYSIS_SCORE


class PersonalInfo(BaseModel):
    """Contact and identity block of a resume."""

    image: str = Field(default="", description="Profile image URL")
    full_name: str = Field(default="", description="Full name")
    profession: str = Field(default="", description="Headline profession")
    email: str = Field(default="", description="Contact email")
    phone: str = Field(default="", description="Phone number")
    location: str = Field(default="", description="Current location")
    linkedin: str = Field(default="", description="LinkedIn profile URL")
    website: str = Field(default="", description="Personal website URL")


class Experience(BaseModel):
    """A single work experience entry."""

    company: str = Field(default="", description="Employer name")
    position: str = Field(default="", description="Job title")
    start_date: str = Field(default="", description="Start date as written")
    end_date: str = Field(default="", description="End date as written")
    description: str = Field(default="", description="Responsibilities and achievements")
    is_current: bool = Field(default=False, description="Whether this is the current role")


class Project(BaseModel):
    """A single project entry."""

    name: str = Field(default="", description="Project name")
    type: str = Field(default="", description="Project type or category")
    description: str = Field(default="", description="What the project does")


class Education(BaseModel):
    """Educational background entry."""

    institution: str = Field(default="", description="University/college name")
    degree: str = Field(default="", description="Degree type (BS, MS, PhD, etc.)")
    field: str = Field(default="", description="Field of study")
    graduation_date: str = Field(default="", description="Graduation date as written")
    gpa: str = Field(default="", description="GPA as written")


class ResumeContent(BaseModel):
    """Structured resume content extracted from raw text."""

    professional_summary: str = Field(default="", description="Professional summary")
    skills: list[str] = Field(default_factory=list, description="List of skills")
    personal_info: PersonalInfo = Field(
        default_factory=PersonalInfo, description="Contact details"
    )
    experience: list[Experience] = Field(default_factory=list, description="Work history")
    project: list[Project] = Field(default_factory=list, description="Projects")
    education: list[Education] = Field(default_factory=list, description="Education entries")


class Resume(ResumeContent):
    """A stored resume document as seen by the services."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Resume identifier")
    user_id: str = Field(description="Owner identifier; immutable after creation")
    title: str = Field(default="", description="User-facing resume title")
    analysis_purchased: bool = Field(
        default=False, description="Whether the paid analysis is unlocked"
    )


class AnalysisFeedback(BaseModel):
    """Per-criterion feedback for a resume analysis."""

    overall: str = Field(description="Final thoughts and key recommendations")
    clarity: str = Field(description="Clarity and conciseness")
    ats_optimization: str = Field(description="Keyword optimization for ATS")
    impact: str = Field(description="Action verbs and quantified impact")
    completeness: str = Field(description="Missing sections or information")


class ResumeAnalysis(BaseModel):
    """Scored analysis of a resume."""

    score: int = Field(
        ge=MIN_ANALYSIS_SCORE, le=MAX_ANALYSIS_SCORE, description="Score out of 100"
    )
    feedback: AnalysisFeedback = Field(description="Constructive feedback per criterion")
