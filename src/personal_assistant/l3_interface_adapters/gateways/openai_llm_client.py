"""Gateway: OpenAI-compatible LLM client — implements LLMClient port.

Works with any OpenAI-compatible API: OpenAI, Gemini, Groq, Together, vLLM, etc.
"""

from __future__ import annotations

import openai

from personal_assistant.l1_entities.chat_message import ChatMessage
from personal_assistant.l2_use_cases.ports.llm_client import ChatResponse


class OpenAICompatLLMClient:
    """Wraps openai.AsyncOpenAI to implement the LLMClient protocol. Never retries."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = 'https://api.openai.com/v1',
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._async_client: openai.AsyncOpenAI | None = None

    def _client(self) -> openai.AsyncOpenAI:
        if self._async_client is None:
            kwargs: dict = {'api_key': self._api_key, 'base_url': self._base_url, 'max_retries': 0}
            if self._timeout is not None:
                kwargs['timeout'] = self._timeout
            self._async_client = openai.AsyncOpenAI(**kwargs)
        return self._async_client

    async def chat(
        self,
        model: str,
        messages: list[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> ChatResponse:
        resp = await self._client().chat.completions.create(
            model=model,
            messages=[{'role': m.role, 'content': m.content} for m in messages],  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = (resp.choices[0].message.content if resp.choices else None) or ''
        total_tokens = resp.usage.total_tokens if resp.usage else 0
        return ChatResponse(content=content, total_tokens=total_tokens, model=resp.model or model)

    async def aclose(self) -> None:
        if self._async_client is not None:
            await self._async_client.close()
            self._async_client = None

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = openai.OpenAI(api_key=self._api_key, base_url=self._base_url)
            client.models.list()
            return True, ''
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'

    def check_models(self, models: list[str]) -> list[str]:
        """Return model names that don't exist on the remote API.

        Falls back to empty list if the models endpoint is unsupported
        (common with non-OpenAI compatible providers).
        """
        try:
            client = openai.OpenAI(api_key=self._api_key, base_url=self._base_url)
            missing = []
            for model in models:
                try:
                    client.models.retrieve(model)
                except openai.NotFoundError:
                    missing.append(model)
            return missing
        except Exception:
            return []
