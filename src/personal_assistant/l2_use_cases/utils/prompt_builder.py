"""Pure functions for building the completion request from stored state."""

from __future__ import annotations

from personal_assistant.l1_entities.chat_message import ChatMessage
from personal_assistant.l1_entities.errors import EmptyMessageError
from personal_assistant.l1_entities.message import Message


def validate_user_text(text: object) -> str:
    """Return *text* unchanged if it is a non-blank string. Raises EmptyMessageError otherwise."""
    if not isinstance(text, str) or not text.strip():
        raise EmptyMessageError('Message must not be empty')
    return text


def build_completion_messages(system_prompt: str, history: list[Message]) -> list[ChatMessage]:
    """System prompt first, then the stored history (the new user turn is its last entry)."""
    return [ChatMessage(role='system', content=system_prompt)] + [m.to_chat_message() for m in history]
