"""Transcript message entity — one stored turn of the conversation."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from personal_assistant.l1_entities.chat_message import ChatMessage

Role = Literal['user', 'assistant']


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    """An immutable transcript record. ``tokens``/``model`` are set on successful assistant replies only."""

    model_config = {'frozen': True}

    id: int
    role: Role
    content: str
    timestamp: datetime = Field(default_factory=utc_now)
    tokens: int | None = None
    model: str | None = None

    def to_chat_message(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)

    def to_wire(self) -> dict:
        """JSON-ready dict; unset metadata is omitted."""
        return self.model_dump(mode='json', exclude_none=True)
