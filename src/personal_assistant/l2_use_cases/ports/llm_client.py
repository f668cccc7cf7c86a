"""Port: LLM chat-completion client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from personal_assistant.l1_entities.chat_message import ChatMessage


@dataclass(frozen=True)
class ChatResponse:
    """Response from an LLM chat call."""

    content: str
    total_tokens: int = 0
    model: str = ''


class LLMClient(Protocol):
    """Abstract LLM client. Zero framework types leak through."""

    async def chat(
        self,
        model: str,
        messages: list[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> ChatResponse:
        """Multi-turn chat. Returns structured response; raises on provider failure."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...

    def check_models(self, models: list[str]) -> list[str]:
        """Return model names from the list that the provider does not serve."""
        ...

    async def aclose(self) -> None:
        """Release network resources. Safe to call more than once."""
        ...
