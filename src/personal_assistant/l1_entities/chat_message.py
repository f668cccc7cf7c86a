"""Chat message entity — what the completion provider sees."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """A single message in an LLM conversation."""

    role: Literal['system', 'user', 'assistant']
    content: str
