"""ChatController — owns the conversation and settings stores, serves the HTTP layer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from personal_assistant.l1_entities.config import AppConfig
from personal_assistant.l1_entities.conversation import ConversationStore
from personal_assistant.l1_entities.message import Message
from personal_assistant.l1_entities.settings import AssistantSettings, SettingsStore
from personal_assistant.l2_use_cases.export_history_use_case import ExportHistoryUseCase
from personal_assistant.l2_use_cases.ports.llm_client import LLMClient
from personal_assistant.l2_use_cases.send_message_use_case import SendMessageUseCase, SendResult
from personal_assistant.l2_use_cases.utils.fallback import FallbackSelector, random_fallback

log = logging.getLogger('pa.controller')


class ChatController:
    """Central orchestrator between the stores, the use cases and the API routes.

    Both stores are created here, once per controller, so every test (or every
    app instance) gets its own isolated state.
    """

    def __init__(
        self,
        config: AppConfig,
        llm_client: LLMClient,
        *,
        select_fallback: FallbackSelector = random_fallback,
    ) -> None:
        self._config = config
        self._llm = llm_client
        self.conversation = ConversationStore(limit=config.history.limit)
        self.settings = SettingsStore(
            config.assistant.default_settings(),
            allowed_models=config.assistant.models,
        )

        self._send_uc = SendMessageUseCase(
            llm_client,
            self.conversation,
            self.settings,
            select_fallback=select_fallback,
        )
        self._export_uc = ExportHistoryUseCase(self.conversation, self.settings)

    async def send_message(self, text: object) -> SendResult:
        """Run one chat turn. Raises EmptyMessageError for blank input."""
        result = await self._send_uc.execute(text)
        if not result.ok:
            log.warning('Chat turn fell back: %s', result.error)
        return result

    def history(self) -> list[Message]:
        return self.conversation.list()

    def clear_history(self) -> None:
        count = len(self.conversation)
        self.conversation.clear()
        log.info('History cleared (%d messages dropped)', count)

    def get_settings(self) -> AssistantSettings:
        return self.settings.get()

    @property
    def allowed_models(self) -> list[str]:
        return self.settings.allowed_models

    def update_settings(self, partial: Mapping[str, Any]) -> AssistantSettings:
        merged = self.settings.update(partial)
        log.info(
            'Settings updated: model=%s temperature=%.2f max_tokens=%d',
            merged.model,
            merged.temperature,
            merged.max_tokens,
        )
        return merged

    def export(self) -> dict[str, Any]:
        return self._export_uc.execute()

    def status(self) -> tuple[int, str]:
        """Return (message count, current model id)."""
        return len(self.conversation), self.settings.get().model

    async def aclose(self) -> None:
        await self._llm.aclose()
