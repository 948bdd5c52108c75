"""Abstract LLM client interface."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class LLMClient(Protocol):
    """Abstract interface for chat-completion providers."""

    async def complete(self, system: str, user: str, *, model: str) -> str:
        """Return the plain-text completion for a system/user prompt pair."""
        ...

    async def extract(
        self,
        system: str,
        user: str,
        *,
        model: str,
        response_model: type[T],
    ) -> T:
        """Return a completion parsed and validated into ``response_model``."""
        ...
