"""Configuration package."""

from resume_ai_core.config.settings import Settings

__all__ = ["Settings"]
