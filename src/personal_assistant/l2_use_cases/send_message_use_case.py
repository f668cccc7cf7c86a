"""Use case: send one user message and record the assistant reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from personal_assistant.l1_entities.conversation import ConversationStore
from personal_assistant.l1_entities.message import Message
from personal_assistant.l1_entities.settings import SettingsStore
from personal_assistant.l2_use_cases.ports.llm_client import LLMClient
from personal_assistant.l2_use_cases.utils.fallback import FALLBACK_RESPONSES, FallbackSelector, random_fallback
from personal_assistant.l2_use_cases.utils.prompt_builder import build_completion_messages, validate_user_text

log = logging.getLogger('pa.llm')


@dataclass(frozen=True)
class SendResult:
    """Outcome of one chat turn. ``reply`` is always recorded, even when it is a fallback."""

    user_message: Message
    reply: Message
    error: str = ''

    @property
    def ok(self) -> bool:
        return not self.error


class SendMessageUseCase:
    """Appends the user turn, calls the LLM once, appends the reply or a fallback."""

    def __init__(
        self,
        llm_client: LLMClient,
        conversation: ConversationStore,
        settings: SettingsStore,
        *,
        select_fallback: FallbackSelector = random_fallback,
        fallback_responses: tuple[str, ...] = FALLBACK_RESPONSES,
    ) -> None:
        self._llm = llm_client
        self._conversation = conversation
        self._settings = settings
        self._select_fallback = select_fallback
        self._fallback_responses = fallback_responses

    async def execute(self, text: object) -> SendResult:
        """Run one chat turn. Raises EmptyMessageError before touching the store."""
        content = validate_user_text(text)
        user_message = self._conversation.record('user', content)

        settings = self._settings.get()
        messages = build_completion_messages(settings.system_prompt, self._conversation.list())
        log.info(
            'Chat request: model=%s, msgs=%d, temperature=%.2f, max_tokens=%d',
            settings.model,
            len(messages),
            settings.temperature,
            settings.max_tokens,
        )

        try:
            resp = await self._llm.chat(
                model=settings.model,
                messages=messages,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
            )
        except Exception as e:
            err = f'LLM error: {type(e).__name__}: {e}'
            log.error(err, exc_info=True)
            return self._fall_back(user_message, err)

        if not resp.content.strip():
            err = 'Empty response from LLM'
            log.warning(err)
            return self._fall_back(user_message, err)

        reply = self._conversation.record(
            'assistant',
            resp.content,
            tokens=resp.total_tokens,
            model=settings.model,
        )
        log.info(
            'Chat reply: %d chars, total_tokens=%d, served_by=%s',
            len(resp.content),
            resp.total_tokens,
            resp.model,
        )
        return SendResult(user_message=user_message, reply=reply)

    def _fall_back(self, user_message: Message, error: str) -> SendResult:
        text = self._select_fallback(self._fallback_responses)
        reply = self._conversation.record('assistant', text)
        return SendResult(user_message=user_message, reply=reply, error=error)
