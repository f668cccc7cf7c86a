"""ChatApp — Textual presentation client for the assistant backend."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Input, Static

from personal_assistant.l1_entities.theme import Theme
from personal_assistant.l3_interface_adapters.controllers.client_controller import ClientController
from personal_assistant.l4_frameworks_and_drivers.widgets.confirm_modal import ConfirmModal
from personal_assistant.l4_frameworks_and_drivers.widgets.settings_modal import SettingsModal
from personal_assistant.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from personal_assistant.l4_frameworks_and_drivers.widgets.transcript_view import TranscriptView

log = logging.getLogger('pa.app')

TEXTUAL_THEMES = {Theme.LIGHT: 'textual-light', Theme.DARK: 'textual-dark'}


class ChatApp(TextualApp):
    """Single-screen chat UI. All state lives in the injected ClientController."""

    CSS_PATH = 'chat.tcss'

    BINDINGS = [
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
        Binding('ctrl+s', 'open_settings', 'Settings', priority=True),
        Binding('ctrl+t', 'toggle_theme', 'Theme', priority=True),
        Binding('ctrl+e', 'export_history', 'Export', priority=True),
        Binding('ctrl+l', 'clear_history', 'Clear', priority=True),
        Binding('ctrl+r', 'reconnect', 'Reconnect', priority=True),
    ]

    def __init__(self, controller: ClientController, export_dir: Path | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._controller.on_change = self._refresh_view
        self._export_dir = export_dir or Path.cwd()

    def compose(self) -> ComposeResult:
        yield Static('  🤖 My AI Assistant', id='header')
        yield TranscriptView(id='transcript')
        with Horizontal(id='input-row'):
            yield Input(placeholder='Type a message...', id='message-input')
            yield Button('➤', id='send-button')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.keybinding_hints = r'\[^s] settings  \[^t] theme  \[^e] export  \[^l] clear  \[^q] quit'
        self._apply_theme()
        self._refresh_view()
        self.run_worker(self._connect(), exclusive=True, group='connect')

    async def on_unmount(self) -> None:
        await self._controller.aclose()

    # --- Rendering ---

    def _apply_theme(self) -> None:
        self.theme = TEXTUAL_THEMES[self._controller.state.theme]

    def _refresh_view(self) -> None:
        state = self._controller.state
        self.query_one('#transcript', TranscriptView).render_entries(state.transcript, loading=state.loading)

        message_input = self.query_one('#message-input', Input)
        message_input.disabled = not state.input_enabled
        message_input.placeholder = 'Type a message...' if state.connected else 'Server unavailable'
        self.query_one('#send-button', Button).disabled = not state.input_enabled

        bar = self.query_one('#status-bar', StatusBar)
        bar.connected = state.connected
        bar.loading = state.loading
        bar.model = state.current_model
        bar.message_count = len(state.transcript)

    # --- Workers ---

    async def _connect(self) -> None:
        ok = await self._controller.connect()
        if not ok:
            self.notify('Server unavailable. Press Ctrl+R to retry.', severity='warning', timeout=5)
        self._refresh_view()
        self._focus_input()

    async def _submit(self, text: str) -> None:
        try:
            await self._controller.submit(text)
        finally:
            self._refresh_view()
            self._focus_input()

    def _focus_input(self) -> None:
        message_input = self.query_one('#message-input', Input)
        if not message_input.disabled:
            message_input.focus()

    def _send(self, text: str) -> None:
        if not text.strip() or not self._controller.state.input_enabled:
            return
        self.query_one('#message-input', Input).value = ''
        self.run_worker(self._submit(text), group='chat')

    # --- Event handlers ---

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == 'message-input':
            event.stop()
            self._send(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'send-button':
            event.stop()
            self._send(self.query_one('#message-input', Input).value)
        elif event.button.has_class('quick-command') and event.button.name:
            event.stop()
            message_input = self.query_one('#message-input', Input)
            message_input.value = event.button.name
            self._focus_input()

    # --- Actions ---

    def action_open_settings(self) -> None:
        settings = self._controller.state.settings
        if settings is None:
            self.notify('Settings are not loaded yet', severity='warning', timeout=3)
            return
        modal = SettingsModal(settings, self._controller.state.models, on_save=self._controller.save_settings)
        self.push_screen(modal, self._on_settings_closed)

    def _on_settings_closed(self, saved: bool | None) -> None:
        if saved:
            self.notify('Settings saved', timeout=2)
        self._refresh_view()

    def action_toggle_theme(self) -> None:
        self._controller.toggle_theme()
        self._apply_theme()

    def action_export_history(self) -> None:
        self.run_worker(self._export(), group='export')

    async def _export(self) -> None:
        path = await self._controller.export_history(self._export_dir)
        if path is None:
            self.notify('Export failed', severity='error', timeout=4)
        else:
            self.notify(f'Exported to {path}', timeout=4)

    def action_clear_history(self) -> None:
        if not self._controller.state.transcript:
            return
        self.push_screen(
            ConfirmModal('Are you sure you want to clear the whole chat history?', confirm_label='Clear'),
            self._on_clear_confirmed,
        )

    def _on_clear_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            self.run_worker(self._clear(), group='clear')

    async def _clear(self) -> None:
        if not await self._controller.clear_history():
            self.notify('Could not clear history', severity='error', timeout=4)
        self._refresh_view()

    def action_reconnect(self) -> None:
        self.run_worker(self._connect(), exclusive=True, group='connect')

    def action_quit_app(self) -> None:
        self.exit()
