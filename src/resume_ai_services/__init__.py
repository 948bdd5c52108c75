"""AI and payment services for resume-ai-gateway."""
