"""Settings modal — editor for model, temperature, token cap and system prompt."""

from __future__ import annotations

import contextlib
from collections.abc import Awaitable, Callable
from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Select, Static, TextArea

from personal_assistant.l1_entities.settings import AssistantSettings

SaveCallback = Callable[[dict[str, Any]], Awaitable[bool]]


class SettingsModal(ModalScreen[bool]):
    """Edits a draft of the settings. Closes with True only after *on_save* confirms; Escape → False."""

    DEFAULT_CSS = """
    SettingsModal {
        align: center middle;
    }

    SettingsModal > VerticalScroll {
        width: 80%;
        max-width: 100;
        height: auto;
        max-height: 90%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    SettingsModal #settings-title {
        text-style: bold;
        margin-bottom: 1;
    }

    SettingsModal .field-label {
        margin-top: 1;
        color: $text-muted;
    }

    SettingsModal #settings-prompt {
        height: 10;
    }

    SettingsModal Horizontal {
        height: auto;
        align: right middle;
        margin-top: 1;
    }

    SettingsModal Button {
        margin-left: 2;
    }
    """

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(
        self,
        settings: AssistantSettings,
        models: list[str],
        on_save: SaveCallback,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._settings = settings
        self._models = list(models) if settings.model in models else [settings.model, *models]
        self._on_save = on_save

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static('⚙️ AI settings', id='settings-title')
            yield Static('Model', classes='field-label')
            yield Select(
                [(m, m) for m in self._models],
                value=self._settings.model,
                allow_blank=False,
                id='settings-model',
            )
            yield Static('Creativity / temperature (0-2)', classes='field-label')
            yield Input(value=str(self._settings.temperature), id='settings-temperature')
            yield Static('Max tokens (50-4000)', classes='field-label')
            yield Input(value=str(self._settings.max_tokens), id='settings-max-tokens')
            yield Static('System prompt', classes='field-label')
            yield TextArea(self._settings.system_prompt, id='settings-prompt')
            with Horizontal():
                yield Button('Cancel', id='settings-cancel')
                yield Button('Save', variant='primary', id='settings-save')

    def build_draft(self) -> dict[str, Any]:
        """Collect the edited fields; unparsable numbers are left out for the server to keep."""
        draft: dict[str, Any] = {}
        model = self.query_one('#settings-model', Select).value
        if isinstance(model, str):
            draft['model'] = model
        with contextlib.suppress(ValueError):
            draft['temperature'] = float(self.query_one('#settings-temperature', Input).value)
        with contextlib.suppress(ValueError):
            draft['maxTokens'] = int(self.query_one('#settings-max-tokens', Input).value)
        draft['systemPrompt'] = self.query_one('#settings-prompt', TextArea).text
        return draft

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == 'settings-save':
            self.run_worker(self._save(self.build_draft()), exclusive=True, group='settings-save')
        else:
            self.dismiss(False)

    async def _save(self, draft: dict[str, Any]) -> None:
        if await self._on_save(draft):
            self.dismiss(True)
        else:
            self.app.notify('Could not save settings', severity='error', timeout=4)

    def action_cancel(self) -> None:
        self.dismiss(False)
