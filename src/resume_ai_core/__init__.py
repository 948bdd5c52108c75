"""Domain models, settings, and interfaces for resume-ai-gateway."""
