"""Fixtures for API-level tests against a file-backed SQLite database."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resume_ai_api.app import create_app
from tests.mocks.mock_gateway import FakePaymentGateway
from tests.mocks.mock_llm import FakeLLMClient
from tests.mocks.mock_settings import make_real_settings


@pytest.fixture
def api_llm() -> FakeLLMClient:
    """Return the fake LLM client wired into the app."""
    return FakeLLMClient()


@pytest.fixture
def api_gateway() -> FakePaymentGateway:
    """Return the fake payment gateway wired into the app."""
    return FakePaymentGateway(order_id="order_R1_001")


@pytest.fixture
def app(
    tmp_path: Path, api_llm: FakeLLMClient, api_gateway: FakePaymentGateway
) -> FastAPI:
    """Build the application over a temporary database."""
    settings = make_real_settings(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    return create_app(settings, llm_client=api_llm, payment_gateway=api_gateway)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Yield a TestClient with the lifespan (table creation) running."""
    with TestClient(app) as test_client:
        yield test_client
