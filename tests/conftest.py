"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Generator
from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from resume_ai_infra.db.models import Base
from resume_ai_infra.db.repositories.resume_repo import ResumeRepository
from resume_ai_infra.db.session import create_session_factory
from tests.mocks.mock_gateway import FakePaymentGateway
from tests.mocks.mock_llm import FakeLLMClient
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    """Return a fake LLM client with default canned responses."""
    return FakeLLMClient()


@pytest.fixture
def fake_gateway() -> FakePaymentGateway:
    """Return a fake payment gateway."""
    return FakePaymentGateway()


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Create an in-memory SQLite session for testing."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = create_session_factory(engine)
    async with factory() as sess:
        yield sess
    await engine.dispose()


@pytest.fixture
def repo(session: AsyncSession) -> ResumeRepository:
    """Return a ResumeRepository bound to the test session."""
    return ResumeRepository(session)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers.

    configure_logging() replaces root handlers; stale StreamHandlers would
    otherwise write to pytest-captured streams closed during teardown.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level
