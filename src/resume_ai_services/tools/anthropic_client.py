"""Anthropic-backed LLM client with structured output via instructor."""

from __future__ import annotations

import time
from typing import TypeVar

import anthropic
import instructor
import structlog
from anthropic import AsyncAnthropic
from instructor.exceptions import IncompleteOutputException, InstructorRetryException
from pydantic import BaseModel, ValidationError

from resume_ai_core.exceptions import AIResponseParseError, CompletionError

T = TypeVar("T", bound=BaseModel)

logger = structlog.get_logger()


class AnthropicLLMClient:
    """LLMClient implementation over the Anthropic Messages API."""

    def __init__(self, api_key: str, max_tokens: int = 4096, max_retries: int = 2) -> None:
        """Initialize the raw and instructor-patched clients."""
        self._client = AsyncAnthropic(api_key=api_key)
        self._instructor = instructor.from_anthropic(self._client)
        self._max_tokens = max_tokens
        self._max_retries = max_retries

    async def complete(self, system: str, user: str, *, model: str) -> str:
        """Return the text of a single completion."""
        start = time.monotonic()
        try:
            response = await self._client.messages.create(
                model=model,
                max_tokens=self._max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.APIError as exc:
            logger.error("llm_call_failed", model=model, error_type=type(exc).__name__)
            raise CompletionError from exc

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        ).strip()
        logger.debug(
            "llm_call_complete",
            model=model,
            duration=round(time.monotonic() - start, 2),
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )
        if not text:
            raise CompletionError("AI returned an empty response. Please try again.")
        return text

    async def extract(
        self,
        system: str,
        user: str,
        *,
        model: str,
        response_model: type[T],
    ) -> T:
        """Return a completion validated into ``response_model``.

        instructor re-asks up to ``max_retries`` times when the output does
        not validate; a final failure becomes AIResponseParseError.
        """
        start = time.monotonic()
        try:
            result: T = await self._instructor.messages.create(
                model=model,
                max_tokens=self._max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
                response_model=response_model,
                max_retries=self._max_retries,
            )
        except (IncompleteOutputException, InstructorRetryException, ValidationError) as exc:
            logger.error(
                "llm_parse_failed",
                model=model,
                response_model=response_model.__name__,
                error_type=type(exc).__name__,
            )
            raise AIResponseParseError from exc
        except anthropic.APIError as exc:
            logger.error("llm_call_failed", model=model, error_type=type(exc).__name__)
            raise CompletionError from exc

        logger.debug(
            "llm_extract_complete",
            model=model,
            response_model=response_model.__name__,
            duration=round(time.monotonic() - start, 2),
        )
        return result
