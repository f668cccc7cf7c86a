"""Gateway: theme preference kept in a one-line file — implements ThemeStore port."""

from __future__ import annotations

import logging
from pathlib import Path

from personal_assistant.l1_entities.theme import Theme
from personal_assistant.l3_interface_adapters.gateways.paths import THEME_PATH

log = logging.getLogger('pa.client')


class FileThemeStore:
    """Persists the client theme under the user config directory, independent of the server."""

    def __init__(self, path: Path = THEME_PATH, default: Theme = Theme.LIGHT) -> None:
        self._path = path
        self._default = default

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Theme:
        try:
            raw = self._path.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return self._default
        try:
            return Theme(raw)
        except ValueError:
            log.warning('Ignoring unknown theme %r in %s', raw, self._path)
            return self._default

    def save(self, theme: Theme) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(theme.value + '\n', encoding='utf-8')
