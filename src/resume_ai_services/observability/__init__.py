"""Observability: structured logging."""

from resume_ai_services.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
]
