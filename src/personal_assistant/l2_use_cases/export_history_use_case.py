"""Use case: build the downloadable dump of the conversation and settings."""

from __future__ import annotations

from typing import Any

from personal_assistant.l1_entities.conversation import ConversationStore
from personal_assistant.l1_entities.message import utc_now
from personal_assistant.l1_entities.settings import SettingsStore


class ExportHistoryUseCase:
    """Snapshots every stored message (role markers included) with the current settings."""

    def __init__(self, conversation: ConversationStore, settings: SettingsStore) -> None:
        self._conversation = conversation
        self._settings = settings

    def execute(self) -> dict[str, Any]:
        messages = self._conversation.list()
        return {
            'timestamp': utc_now().isoformat(),
            'messages': [m.to_wire() for m in messages],
            'settings': self._settings.get().to_wire(),
            'totalMessages': len(messages),
        }
