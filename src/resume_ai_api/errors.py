"""Translate domain errors into ``{message}`` JSON responses."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_ai_core.exceptions import ResumeAIError

logger = structlog.get_logger()

INVALID_BODY_MESSAGE = "Invalid request body"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


async def handle_resume_ai_error(request: Request, exc: ResumeAIError) -> JSONResponse:
    """Render a domain error with its own status code and safe message."""
    logger.info(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed bodies with 400 instead of FastAPI's default 422."""
    logger.info(
        "request_invalid",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(status_code=400, content={"message": INVALID_BODY_MESSAGE})


def unexpected_error_response() -> JSONResponse:
    """Generic 500 body that never exposes internals."""
    return JSONResponse(status_code=500, content={"message": UNEXPECTED_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain and validation handlers to ``app``."""
    app.add_exception_handler(ResumeAIError, handle_resume_ai_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, handle_request_validation_error  # type: ignore[arg-type]
    )
