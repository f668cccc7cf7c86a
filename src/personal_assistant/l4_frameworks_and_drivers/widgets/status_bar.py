"""Status bar — bottom bar showing connectivity, current model, activity and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with connection state and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: auto;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    connected: reactive[bool] = reactive(False)
    loading: reactive[bool] = reactive(False)
    model: reactive[str] = reactive('')
    message_count: reactive[int] = reactive(0)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        status = '● Online' if self.connected else '○ Offline'
        if self.connected and self.model:
            status += f' ({self.model})'

        left_parts = [status, f'{self.message_count} msgs']
        if self.loading:
            left_parts.append('⟳ Thinking…')
        left = ' │ '.join(left_parts)

        content_width = (self.size.width or 80) - 2
        hints = self.keybinding_hints
        if hints:
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
