"""Presentation client view state — a local mirror of server state plus UI-only flags."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from personal_assistant.l1_entities.message import utc_now
from personal_assistant.l1_entities.settings import AssistantSettings
from personal_assistant.l1_entities.theme import Theme


class TranscriptEntry(BaseModel):
    """One rendered line of the transcript, as the client knows it."""

    id: int
    text: str
    is_user: bool
    timestamp: datetime = Field(default_factory=utc_now)
    tokens: int | None = None
    model: str | None = None


class ClientViewState(BaseModel):
    """Mutable view state owned by the client controller."""

    transcript: list[TranscriptEntry] = Field(default_factory=list)
    loading: bool = False
    connected: bool = False
    settings: AssistantSettings | None = None
    models: list[str] = Field(default_factory=list)
    current_model: str = ''
    theme: Theme = Theme.LIGHT

    @property
    def input_enabled(self) -> bool:
        return self.connected and not self.loading
