"""ClientController — presentation-client view state over the backend API."""

from __future__ import annotations

import contextlib
import logging
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from personal_assistant.l1_entities.client_view import ClientViewState, TranscriptEntry
from personal_assistant.l1_entities.errors import ApiUnavailableError
from personal_assistant.l1_entities.settings import AssistantSettings
from personal_assistant.l1_entities.theme import Theme
from personal_assistant.l2_use_cases.ports.assistant_api import AssistantApi
from personal_assistant.l2_use_cases.ports.theme_store import ThemeStore

log = logging.getLogger('pa.client')

GENERIC_FAILURE_TEXT = 'Sorry, something went wrong 😔'
UNREACHABLE_TEXT = "Can't connect to the server 😞"


class ClientController:
    """Mirrors server state locally; the Textual app only renders ``state``."""

    def __init__(self, api: AssistantApi, theme_store: ThemeStore) -> None:
        self._api = api
        self._theme_store = theme_store
        self._last_id = 0
        self.state = ClientViewState(theme=theme_store.load())
        self.on_change: Callable[[], None] | None = None  # called once the optimistic entry is in place

    def _next_id(self) -> int:
        self._last_id = max(time.time_ns() // 1_000_000, self._last_id + 1)
        return self._last_id

    def _append(
        self,
        text: str,
        *,
        is_user: bool,
        tokens: int | None = None,
        model: str | None = None,
    ) -> TranscriptEntry:
        entry = TranscriptEntry(id=self._next_id(), text=text, is_user=is_user, tokens=tokens, model=model)
        self.state.transcript.append(entry)
        return entry

    # --- Server sync ---

    async def connect(self) -> bool:
        """Check server status; on success load history and settings."""
        try:
            info = await self._api.status()
        except ApiUnavailableError as e:
            log.warning('Server unavailable: %s', e)
            self.state.connected = False
            return False

        self.state.connected = True
        self.state.current_model = str(info.get('currentModel') or '')
        await self.load_history()
        await self.load_settings()
        return True

    async def load_history(self) -> None:
        try:
            data = await self._api.history()
        except ApiUnavailableError as e:
            log.warning('Could not load history: %s', e)
            return
        if not data.get('success'):
            return
        self.state.transcript = [self._entry_from_wire(m) for m in data.get('history') or [] if isinstance(m, dict)]

    async def load_settings(self) -> None:
        try:
            data = await self._api.settings()
        except ApiUnavailableError as e:
            log.warning('Could not load settings: %s', e)
            return
        settings = _parse_settings(data.get('settings')) if data.get('success') else None
        if settings is not None:
            self.state.settings = settings
            self.state.current_model = settings.model
        models = data.get('models')
        if isinstance(models, list):
            self.state.models = [str(m) for m in models]

    def _entry_from_wire(self, msg: dict[str, Any]) -> TranscriptEntry:
        msg_id = msg.get('id')
        if isinstance(msg_id, int):
            self._last_id = max(self._last_id, msg_id)
        else:
            msg_id = self._next_id()
        fields: dict[str, Any] = {
            'id': msg_id,
            'text': str(msg.get('content') or ''),
            'is_user': msg.get('role') == 'user',
            'tokens': msg.get('tokens'),
            'model': msg.get('model'),
        }
        if isinstance(msg.get('timestamp'), str):
            with contextlib.suppress(ValueError):
                fields['timestamp'] = datetime.fromisoformat(msg['timestamp'])
        try:
            return TranscriptEntry.model_validate(fields)
        except ValidationError:
            return TranscriptEntry(id=msg_id, text=fields['text'], is_user=fields['is_user'])

    # --- User actions ---

    async def submit(self, text: str) -> TranscriptEntry | None:
        """Send *text*. Returns the reply entry, or None when the input was not accepted."""
        if not text.strip() or not self.state.input_enabled:
            return None

        self._append(text, is_user=True)
        self.state.loading = True
        if self.on_change is not None:
            self.on_change()
        try:
            data = await self._api.send(text)
        except ApiUnavailableError as e:
            log.warning('Send failed: %s', e)
            self.state.connected = False
            return self._append(UNREACHABLE_TEXT, is_user=False)
        finally:
            self.state.loading = False

        tokens = data.get('tokens')
        model = data.get('model')
        return self._append(
            str(data.get('message') or GENERIC_FAILURE_TEXT),
            is_user=False,
            tokens=tokens if isinstance(tokens, int) and not isinstance(tokens, bool) else None,
            model=model if isinstance(model, str) else None,
        )

    async def save_settings(self, draft: dict[str, Any]) -> bool:
        """PUT *draft*; replace local settings only when the server confirms."""
        try:
            data = await self._api.update_settings(draft)
        except ApiUnavailableError as e:
            log.warning('Settings update failed: %s', e)
            return False
        settings = _parse_settings(data.get('settings')) if data.get('success') else None
        if settings is None:
            return False
        self.state.settings = settings
        self.state.current_model = settings.model
        return True

    async def clear_history(self) -> bool:
        try:
            data = await self._api.clear_history()
        except ApiUnavailableError as e:
            log.warning('Clear history failed: %s', e)
            return False
        if not data.get('success'):
            return False
        self.state.transcript = []
        return True

    async def export_history(self, directory: Path) -> Path | None:
        """Download the export dump as ``chat-history-YYYY-MM-DD.json`` under *directory*."""
        destination = directory / f'chat-history-{datetime.now().strftime("%Y-%m-%d")}.json'
        try:
            return await self._api.export(destination)
        except ApiUnavailableError as e:
            log.warning('Export failed: %s', e)
            return None

    def toggle_theme(self) -> Theme:
        """Flip light/dark and persist locally. Never touches the server."""
        self.state.theme = self.state.theme.toggled()
        self._theme_store.save(self.state.theme)
        return self.state.theme

    async def aclose(self) -> None:
        await self._api.aclose()


def _parse_settings(raw: Any) -> AssistantSettings | None:
    if not isinstance(raw, dict):
        return None
    try:
        return AssistantSettings.model_validate(raw)
    except ValidationError:
        return None
