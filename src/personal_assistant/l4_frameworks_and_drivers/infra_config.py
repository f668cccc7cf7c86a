"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import BaseModel, Field

from personal_assistant.l1_entities.config import AppConfig
from personal_assistant.l3_interface_adapters.gateways.paths import LOG_DIR
from personal_assistant.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

DEFAULT_SYSTEM_PROMPT = """\
You are Alex, my personal AI assistant.

Your role:
- Help with everyday tasks
- Answer questions
- Give advice and recommendations
- Help with planning and organising
- Keep up a friendly conversation
- Help with programming and technical questions

Conversation style:
- Friendly and informal
- Emoji are fine
- Short but substantial answers
- Adapt to the other person's style

Traits:
- Remember the context of the conversation
- Admit your mistakes
- Say honestly when you don't know something
- Offer alternatives and options

Be helpful, honest and supportive!"""

APP_CONFIG_DEFAULTS: dict = {
    'assistant': {
        'model': 'gpt-3.5-turbo',
        'models': ['gpt-3.5-turbo', 'gpt-4', 'gpt-4-turbo'],
        'temperature': 0.7,
        'max_tokens': 500,
        'system_prompt': DEFAULT_SYSTEM_PROMPT,
    },
    'history': {
        'limit': 30,
    },
    'server': {
        'host': '127.0.0.1',
        'port': 3001,
        'cors_origins': ['*'],
    },
    'logging': {
        'directory': str(LOG_DIR),
        'level': 'INFO',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → SDK reads OPENAI_API_KEY env
    base_url: str = 'https://api.openai.com/v1'
    timeout: float | None = None  # None → SDK default


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
