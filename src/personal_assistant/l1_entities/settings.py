"""Generation settings entity and its process-lifetime store."""

from __future__ import annotations

import math
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0
MAX_TOKENS_MIN = 50
MAX_TOKENS_MAX = 4000

# wire name / snake_case name → field name
_FIELD_NAMES = {
    'model': 'model',
    'temperature': 'temperature',
    'maxTokens': 'max_tokens',
    'max_tokens': 'max_tokens',
    'systemPrompt': 'system_prompt',
    'system_prompt': 'system_prompt',
}


class AssistantSettings(BaseModel):
    """Model choice and generation parameters. Serialised with camelCase keys."""

    model_config = {
        'alias_generator': to_camel,
        'populate_by_name': True,
        'protected_namespaces': (),
    }

    model: str = Field(min_length=1)
    temperature: float = Field(ge=TEMPERATURE_MIN, le=TEMPERATURE_MAX)
    max_tokens: int = Field(ge=MAX_TOKENS_MIN, le=MAX_TOKENS_MAX)
    system_prompt: str

    def to_wire(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _finite_number(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, int):
        return value  # arbitrary size; clamp compares ints exactly
    if not math.isfinite(value):
        return None
    return value


class SettingsStore:
    """Single shared settings record, replaced field by field.

    Invalid values are dropped per field, never raised: a partial update
    carrying one bad field still applies the good ones.
    """

    def __init__(self, defaults: AssistantSettings, allowed_models: list[str] | None = None) -> None:
        self._settings = defaults.model_copy()
        self._allowed_models = list(allowed_models or [])
        self._lock = threading.Lock()

    @property
    def allowed_models(self) -> list[str]:
        return list(self._allowed_models)

    def get(self) -> AssistantSettings:
        with self._lock:
            return self._settings.model_copy()

    def update(self, partial: Mapping[str, Any]) -> AssistantSettings:
        """Validate, clamp and apply the recognised fields of *partial*. Returns the merged settings."""
        changes = self.validated_changes(partial)
        with self._lock:
            if changes:
                self._settings = self._settings.model_copy(update=changes)
            return self._settings.model_copy()

    def validated_changes(self, partial: Mapping[str, Any]) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        for key, value in partial.items():
            field = _FIELD_NAMES.get(key)
            if field is None:
                continue
            accepted = self._coerce(field, value)
            if accepted is not None:
                changes[field] = accepted
        return changes

    def _coerce(self, field: str, value: Any) -> Any:
        if field == 'temperature':
            number = _finite_number(value)
            return None if number is None else float(clamp(number, TEMPERATURE_MIN, TEMPERATURE_MAX))
        if field == 'max_tokens':
            number = _finite_number(value)
            return None if number is None else int(clamp(int(number), MAX_TOKENS_MIN, MAX_TOKENS_MAX))
        if not isinstance(value, str) or not value.strip():
            return None
        if field == 'model' and self._allowed_models and value not in self._allowed_models:
            return None
        return value
