"""Persistence layer for resume-ai-gateway."""
