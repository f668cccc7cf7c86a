"""Transcript view — scrolling message bubbles, or a welcome panel with quick commands when empty."""

from __future__ import annotations

from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Button, Static

from personal_assistant.l1_entities.client_view import TranscriptEntry

WELCOME_TEXT = "👋 Hi! I'm Alex, your personal AI assistant.\nAsk me anything or ask for help!"

QUICK_COMMANDS: tuple[tuple[str, str], ...] = (
    ('📅', 'Help me plan my day'),
    ('⚡', 'Give me a productivity tip'),
    ('💡', 'Explain it in simple words'),
    ('💻', 'Help me with programming'),
)


def format_entry(entry: TranscriptEntry) -> Text:
    """Message text plus a dim meta line (local time, token count when known)."""
    meta = entry.timestamp.astimezone().strftime('%H:%M:%S')
    if entry.tokens:
        meta += f' ({entry.tokens} tokens)'
    return Text.assemble(entry.text, '\n', (meta, 'dim'))


class TranscriptView(VerticalScroll):
    """Re-renders the whole transcript from view state on every refresh."""

    DEFAULT_CSS = """
    TranscriptView {
        border: solid $primary;
        scrollbar-size: 1 1;
        padding: 0 1;
    }
    TranscriptView > .message {
        width: auto;
        max-width: 80%;
        height: auto;
        padding: 0 1;
        margin: 1 0 0 0;
    }
    TranscriptView > .message.user {
        background: $primary 30%;
    }
    TranscriptView > .message.ai {
        background: $panel;
    }
    TranscriptView > .welcome {
        margin: 1 0;
        text-style: bold;
    }
    TranscriptView > .quick-command {
        width: 100%;
        margin: 0 0 1 0;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = 'Chat'
        self.rendered_ids: list[int] = []
        self.showing_welcome = False

    def render_entries(self, entries: list[TranscriptEntry], *, loading: bool = False) -> None:
        self.remove_children()
        self.rendered_ids = [e.id for e in entries]
        self.showing_welcome = not entries and not loading
        if self.showing_welcome:
            self.mount(Static(WELCOME_TEXT, classes='welcome'))
            self.mount(Static('Quick commands:'))
            for icon, text in QUICK_COMMANDS:
                self.mount(Button(f'{icon} {text}', name=text, classes='quick-command'))
            return

        for entry in entries:
            role = 'user' if entry.is_user else 'ai'
            self.mount(Static(format_entry(entry), classes=f'message {role}'))
        if loading:
            self.mount(Static('…', classes='message ai typing'))
        self.scroll_end(animate=False)
