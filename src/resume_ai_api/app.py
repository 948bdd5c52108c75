"""FastAPI application factory."""

from __future__ import annotations

import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from resume_ai_api import __version__
from resume_ai_api.errors import register_exception_handlers, unexpected_error_response
from resume_ai_api.routes import ai, health
from resume_ai_core.config.settings import Settings
from resume_ai_core.interfaces.llm import LLMClient
from resume_ai_core.interfaces.payment_gateway import PaymentGateway
from resume_ai_infra.db.engine import create_engine
from resume_ai_infra.db.session import create_session_factory, init_db
from resume_ai_services.observability.logging import (
    bind_request_context,
    clear_request_context,
)
from resume_ai_services.tools.factories import create_llm_client, create_payment_gateway

logger = structlog.get_logger()


def create_app(
    settings: Settings | None = None,
    *,
    llm_client: LLMClient | None = None,
    payment_gateway: PaymentGateway | None = None,
    engine: AsyncEngine | None = None,
) -> FastAPI:
    """Build the application with its collaborators.

    Any collaborator left as None is created from settings, so tests can
    inject fakes for the LLM and the payment gateway.
    """
    settings = settings or Settings()  # type: ignore[call-arg]
    db_engine = engine or create_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.db_backend == "sqlite":
            await init_db(db_engine)
        logger.info("app_started", db_backend=settings.db_backend, version=__version__)
        yield
        await db_engine.dispose()
        logger.info("app_stopped")

    app = FastAPI(title="resume-ai-gateway", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = create_session_factory(db_engine)
    app.state.llm_client = llm_client or create_llm_client(settings)
    app.state.payment_gateway = payment_gateway or create_payment_gateway(settings)

    register_exception_handlers(app)

    @app.middleware("http")
    async def request_context(request: Request, call_next) -> Response:  # type: ignore[no-untyped-def]
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        bind_request_context(request_id)
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed",
                method=request.method,
                path=request.url.path,
            )
            response = unexpected_error_response()
        finally:
            clear_request_context()

        response.headers["x-request-id"] = request_id
        logger.info(
            "request_complete",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 3),
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(ai.router)
    return app
