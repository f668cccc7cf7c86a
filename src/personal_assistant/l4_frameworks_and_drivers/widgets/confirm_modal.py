"""Confirm modal — yes/no question before a destructive action."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmModal(ModalScreen[bool]):
    """Returns True on confirm, False on cancel or Escape."""

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }

    ConfirmModal > Vertical {
        width: 60;
        height: auto;
        background: $surface;
        border: thick $warning;
        padding: 1 2;
    }

    ConfirmModal > Vertical > #confirm-question {
        margin-bottom: 1;
    }

    ConfirmModal > Vertical > Horizontal {
        height: auto;
        align: right middle;
    }

    ConfirmModal Button {
        margin-left: 2;
    }
    """

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(self, question: str, confirm_label: str = 'Confirm', **kwargs) -> None:
        super().__init__(**kwargs)
        self._question = question
        self._confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self._question, id='confirm-question')
            with Horizontal():
                yield Button('Cancel', id='confirm-cancel')
                yield Button(self._confirm_label, variant='error', id='confirm-ok')

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == 'confirm-ok')

    def action_cancel(self) -> None:
        self.dismiss(False)
