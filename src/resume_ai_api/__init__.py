"""HTTP surface for resume-ai-gateway."""

__version__ = "0.1.0"
