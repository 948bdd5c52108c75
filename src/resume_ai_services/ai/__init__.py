"""AI-backed resume services."""

from resume_ai_services.ai.analyzer import ResumeAnalyzer, render_resume_text
from resume_ai_services.ai.enhancer import ResumeEnhancer
from resume_ai_services.ai.extractor import ResumeExtractor

__all__ = [
    "ResumeAnalyzer",
    "ResumeEnhancer",
    "ResumeExtractor",
    "render_resume_text",
]
