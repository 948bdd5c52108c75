"""FastAPI dependencies: requester identity, sessions, and services."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import jwt
import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from structlog.contextvars import bind_contextvars

from resume_ai_core.config.settings import Settings
from resume_ai_core.exceptions import AuthenticationError
from resume_ai_core.interfaces.llm import LLMClient
from resume_ai_core.interfaces.payment_gateway import PaymentGateway
from resume_ai_infra.db.repositories.resume_repo import ResumeRepository
from resume_ai_infra.db.session import session_scope
from resume_ai_services.ai.analyzer import ResumeAnalyzer
from resume_ai_services.ai.enhancer import ResumeEnhancer
from resume_ai_services.ai.extractor import ResumeExtractor
from resume_ai_services.payments.order_issuer import OrderIssuer
from resume_ai_services.payments.payment_verifier import PaymentVerifier

logger = structlog.get_logger()

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Return the settings the app was built with."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_llm_client(request: Request) -> LLMClient:
    """Return the shared LLM client."""
    return request.app.state.llm_client  # type: ignore[no-any-return]


def get_payment_gateway(request: Request) -> PaymentGateway:
    """Return the shared payment gateway client."""
    return request.app.state.payment_gateway  # type: ignore[no-any-return]


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Resolve the bearer token to a requester ID or raise AuthenticationError."""
    if credentials is None:
        raise AuthenticationError
    try:
        claims = jwt.decode(
            credentials.credentials,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.PyJWTError as exc:
        logger.info("auth_token_rejected", error_type=type(exc).__name__)
        raise AuthenticationError from exc

    user_id = claims.get("userId") or claims.get("sub")
    if not user_id:
        raise AuthenticationError
    bind_contextvars(user_id=str(user_id))
    return str(user_id)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request; handlers commit their own writes."""
    async with session_scope(request.app.state.session_factory) as session:
        yield session


def get_resume_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ResumeRepository:
    """Return a resume repository bound to the request session."""
    return ResumeRepository(session)


def get_enhancer(
    settings: Settings = Depends(get_settings),
    llm: LLMClient = Depends(get_llm_client),
) -> ResumeEnhancer:
    """Build the text enhancer."""
    return ResumeEnhancer(settings, llm)


def get_extractor(
    settings: Settings = Depends(get_settings),
    llm: LLMClient = Depends(get_llm_client),
    repo: ResumeRepository = Depends(get_resume_repository),
) -> ResumeExtractor:
    """Build the resume extractor."""
    return ResumeExtractor(settings, llm, repo)


def get_analyzer(
    settings: Settings = Depends(get_settings),
    llm: LLMClient = Depends(get_llm_client),
    repo: ResumeRepository = Depends(get_resume_repository),
) -> ResumeAnalyzer:
    """Build the gated resume analyzer."""
    return ResumeAnalyzer(settings, llm, repo)


def get_order_issuer(
    settings: Settings = Depends(get_settings),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    repo: ResumeRepository = Depends(get_resume_repository),
) -> OrderIssuer:
    """Build the order issuer."""
    return OrderIssuer(repo, gateway, currency=settings.payment_currency)


def get_payment_verifier(
    settings: Settings = Depends(get_settings),
    repo: ResumeRepository = Depends(get_resume_repository),
) -> PaymentVerifier:
    """Build the payment verifier with the injected signing secret."""
    return PaymentVerifier(repo, settings.razorpay_key_secret.get_secret_value())

