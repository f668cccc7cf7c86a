"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from personal_assistant.l1_entities.settings import (
    MAX_TOKENS_MAX,
    MAX_TOKENS_MIN,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    AssistantSettings,
)


class AssistantConfig(BaseModel):
    model: str
    models: list[str] = Field(default_factory=list)  # allowed set; empty = any model id
    temperature: float = Field(ge=TEMPERATURE_MIN, le=TEMPERATURE_MAX)
    max_tokens: int = Field(ge=MAX_TOKENS_MIN, le=MAX_TOKENS_MAX)
    system_prompt: str

    @model_validator(mode='after')
    def _validate_default_model_allowed(self) -> AssistantConfig:
        if self.models and self.model not in self.models:
            raise ValueError(f'Default model {self.model!r} is not in the allowed models {self.models}')
        return self

    def default_settings(self) -> AssistantSettings:
        return AssistantSettings(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            system_prompt=self.system_prompt,
        )


class HistoryConfig(BaseModel):
    limit: int = Field(ge=1)


class ServerConfig(BaseModel):
    host: str
    port: int = Field(ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=list)


class LoggingConfig(BaseModel):
    directory: str
    level: str


class AppConfig(BaseModel):
    assistant: AssistantConfig
    history: HistoryConfig
    server: ServerConfig
    logging: LoggingConfig
