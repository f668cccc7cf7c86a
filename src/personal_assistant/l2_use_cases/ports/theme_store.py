"""Port: client-local theme preference storage."""

from __future__ import annotations

from typing import Protocol

from personal_assistant.l1_entities.theme import Theme


class ThemeStore(Protocol):
    def load(self) -> Theme:
        """Return the saved theme, or the default when nothing is saved."""
        ...

    def save(self, theme: Theme) -> None: ...
