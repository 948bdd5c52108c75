"""Tests for observability/logging.py."""

from __future__ import annotations

import io
import logging
from types import SimpleNamespace

import pytest
import structlog
from structlog.contextvars import get_contextvars

from resume_ai_services.observability.logging import (
    REDACTED,
    _resolve_level,
    bind_request_context,
    clear_request_context,
    configure_logging,
    redact_secrets,
)


def _make_settings(**overrides: object) -> object:
    """Create a minimal settings stand-in."""
    defaults: dict[str, object] = {"log_format": "console", "log_level": "INFO"}
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_mode(self) -> None:
        """Console mode installs a single root handler."""
        configure_logging(_make_settings(log_format="console"))  # type: ignore[arg-type]
        assert len(logging.getLogger().handlers) == 1
        assert structlog.get_logger() is not None

    def test_json_mode_renders_stdlib_records(self) -> None:
        """Foreign stdlib records pass through the JSON renderer."""
        configure_logging(_make_settings(log_format="json"))  # type: ignore[arg-type]

        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.getLogger().handlers[0].formatter)
        log = logging.getLogger("test_json_mode")
        log.addHandler(handler)
        log.setLevel(logging.INFO)
        try:
            log.info("payment_verified")
        finally:
            log.removeHandler(handler)

        output = stream.getvalue()
        assert '"event": "payment_verified"' in output
        assert '"level": "info"' in output

    def test_sets_level(self) -> None:
        """Log level is applied to the root logger."""
        configure_logging(_make_settings(log_level="WARNING"))  # type: ignore[arg-type]
        assert logging.getLogger().level == logging.WARNING

    def test_quiets_third_party_loggers(self) -> None:
        """HTTP client loggers never go below WARNING."""
        configure_logging(_make_settings(log_level="DEBUG"))  # type: ignore[arg-type]
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("anthropic").level == logging.WARNING


@pytest.mark.unit
class TestRequestContext:
    """Tests for bind/clear request context."""

    def test_bind_and_clear(self) -> None:
        """Bound keys are visible until cleared."""
        bind_request_context("req-123", user_id="user-1")
        assert get_contextvars() == {"request_id": "req-123", "user_id": "user-1"}
        clear_request_context()
        assert get_contextvars() == {}


@pytest.mark.unit
class TestResolveLevel:
    """Tests for _resolve_level."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("Warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_known_levels(self, name: str, expected: int) -> None:
        """Level names resolve case-insensitively."""
        assert _resolve_level(name) == expected

    def test_unknown_level_defaults_to_info(self) -> None:
        """Unknown names fall back to INFO."""
        assert _resolve_level("VERBOSE") == logging.INFO


@pytest.mark.unit
class TestRedactSecrets:
    """Tests for the redact_secrets processor."""

    def test_masks_sensitive_keys(self) -> None:
        """Signature and credential values are replaced."""
        event = {"event": "x", "razorpay_signature": "abc", "authorization": "Bearer t"}
        result = redact_secrets(None, "info", event)
        assert result["razorpay_signature"] == REDACTED
        assert result["authorization"] == REDACTED
        assert result["event"] == "x"

    def test_leaves_other_keys(self) -> None:
        """Identifiers such as order IDs are kept."""
        event = {"event": "payment_verified", "order_id": "order_1"}
        assert redact_secrets(None, "info", event) == event

    def test_json_output_is_redacted(self) -> None:
        """Secrets never reach the rendered output."""
        configure_logging(_make_settings(log_format="json"))  # type: ignore[arg-type]
        stream = io.StringIO()
        logging.getLogger().handlers[0].stream = stream  # type: ignore[attr-defined]

        structlog.get_logger("test_redaction").warning("leak", signature="deadbeef")

        assert "deadbeef" not in stream.getvalue()
