"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from resume_ai_core.config.settings import Settings

REDACTED = "***"

# Event keys whose values must never reach a log sink
SENSITIVE_KEYS = frozenset(
    {
        "authorization",
        "signature",
        "razorpay_signature",
        "key_secret",
        "api_key",
        "token",
    }
)

NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "anthropic")


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask values of sensitive keys in place."""
    for key in event_dict.keys() & SENSITIVE_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one formatter.

    uvicorn access logs, httpx and SQLAlchemy records go through the same
    processor chain as the service's own events, rendered as JSON or for
    the console depending on ``settings.log_format``.
    """
    shared_processors = _shared_processors()
    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _build_renderer(settings.log_format),
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_request_context(request_id: str, **extra: object) -> None:
    """Bind request_id (and any extra keys) to subsequent log entries."""
    bind_contextvars(request_id=request_id, **extra)


def clear_request_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _build_renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _resolve_level(level_name: str) -> int:
    """Convert a level name string to a logging level int."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO
