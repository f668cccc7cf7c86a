"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from personal_assistant.l1_entities.chat_message import ChatMessage
from personal_assistant.l1_entities.config import AppConfig
from personal_assistant.l1_entities.errors import ApiUnavailableError
from personal_assistant.l1_entities.theme import Theme
from personal_assistant.l2_use_cases.ports.llm_client import ChatResponse
from personal_assistant.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake LLM client for L2 use case tests."""

    def __init__(self, response: str = 'Fake LLM response', total_tokens: int = 42, model: str = 'fake-model'):
        self._response = response
        self._total_tokens = total_tokens
        self._model = model
        self._error: Exception | None = None
        self.closed = False
        self.chat_calls: list[dict[str, Any]] = []
        self._connectivity = (True, '')
        self._missing_models: list[str] = []

    async def chat(
        self,
        model: str,
        messages: list[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> ChatResponse:
        self.chat_calls.append(
            {'model': model, 'messages': list(messages), 'temperature': temperature, 'max_tokens': max_tokens},
        )
        if self._error is not None:
            raise self._error
        return ChatResponse(content=self._response, total_tokens=self._total_tokens, model=self._model)

    async def aclose(self) -> None:
        self.closed = True

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def check_models(self, models: list[str]) -> list[str]:
        return [m for m in models if m in self._missing_models]

    def set_response(self, response: str, total_tokens: int = 42) -> None:
        self._response = response
        self._total_tokens = total_tokens

    def set_error(self, error: Exception | None) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)

    def set_missing_models(self, models: list[str]) -> None:
        self._missing_models = list(models)


class FakeAssistantApi:
    """Fake backend API for client controller and Textual app tests."""

    def __init__(self, *, model: str = 'gpt-3.5-turbo', reply: str = 'Hi there!'):
        self.available = True
        self.reply = reply
        self.reply_payload: dict[str, Any] | None = None
        self.history_payload: list[dict[str, Any]] = []
        self.settings_payload: dict[str, Any] = {
            'model': model,
            'temperature': 0.7,
            'maxTokens': 500,
            'systemPrompt': 'You are Alex.',
        }
        self.models = ['gpt-3.5-turbo', 'gpt-4', 'gpt-4-turbo']
        self.reject_settings = False
        self.sent: list[str] = []
        self.settings_updates: list[dict[str, Any]] = []
        self.clear_calls = 0
        self.exports: list[Path] = []
        self.closed = False

    def _check(self) -> None:
        if not self.available:
            raise ApiUnavailableError('Cannot reach fake server')

    async def status(self) -> dict[str, Any]:
        self._check()
        return {
            'success': True,
            'status': 'Server is running!',
            'totalMessages': len(self.history_payload),
            'currentModel': self.settings_payload['model'],
        }

    async def history(self) -> dict[str, Any]:
        self._check()
        return {'success': True, 'history': list(self.history_payload)}

    async def clear_history(self) -> dict[str, Any]:
        self._check()
        self.clear_calls += 1
        self.history_payload = []
        return {'success': True, 'message': 'History cleared'}

    async def settings(self) -> dict[str, Any]:
        self._check()
        return {'success': True, 'settings': dict(self.settings_payload), 'models': list(self.models)}

    async def update_settings(self, partial: dict[str, Any]) -> dict[str, Any]:
        self._check()
        self.settings_updates.append(dict(partial))
        if self.reject_settings:
            return {'success': False, 'error': 'rejected'}
        self.settings_payload.update(partial)
        return {'success': True, 'settings': dict(self.settings_payload), 'message': 'Settings updated'}

    async def send(self, message: str) -> dict[str, Any]:
        self._check()
        self.sent.append(message)
        if self.reply_payload is not None:
            return self.reply_payload
        return {
            'success': True,
            'message': self.reply,
            'timestamp': '2026-01-01T00:00:00+00:00',
            'tokens': 17,
            'model': self.settings_payload['model'],
        }

    async def export(self, destination: Path) -> Path:
        self._check()
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text('{"messages": []}', encoding='utf-8')
        self.exports.append(destination)
        return destination

    async def aclose(self) -> None:
        self.closed = True


class FakeThemeStore:
    """In-memory theme preference."""

    def __init__(self, theme: Theme = Theme.LIGHT):
        self.theme = theme
        self.saved: list[Theme] = []

    def load(self) -> Theme:
        return self.theme

    def save(self, theme: Theme) -> None:
        self.theme = theme
        self.saved.append(theme)


def first_fallback(options):
    """Deterministic fallback selector."""
    return options[0]


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
assistant:
  model: "gpt-4"
  temperature: 0.3
  max_tokens: 800
history:
  limit: 10
server:
  port: 8080
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def fake_api() -> FakeAssistantApi:
    return FakeAssistantApi()


@pytest.fixture
def fake_theme_store() -> FakeThemeStore:
    return FakeThemeStore()
