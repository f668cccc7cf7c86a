"""Conversation store — the bounded, process-lifetime transcript."""

from __future__ import annotations

import threading
import time
from collections import deque

from personal_assistant.l1_entities.message import Message, Role

DEFAULT_HISTORY_LIMIT = 30


class ConversationStore:
    """Ordered message log holding at most ``limit`` entries; the oldest are evicted first."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f'History limit must be positive, got {limit}')
        self._limit = limit
        self._messages: deque[Message] = deque(maxlen=limit)
        self._last_id = 0
        self._lock = threading.Lock()

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def append(self, message: Message) -> Message:
        with self._lock:
            self._last_id = max(self._last_id, message.id)
            self._messages.append(message)
        return message

    def record(
        self,
        role: Role,
        content: str,
        *,
        tokens: int | None = None,
        model: str | None = None,
    ) -> Message:
        """Create a message with the next id and append it in one step."""
        with self._lock:
            self._last_id = max(time.time_ns() // 1_000_000, self._last_id + 1)
            message = Message(id=self._last_id, role=role, content=content, tokens=tokens, model=model)
            self._messages.append(message)
        return message

    def list(self) -> list[Message]:
        """All non-system messages, oldest first."""
        with self._lock:
            return [m for m in self._messages if m.role != 'system']

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()
