"""L1 entity: client colour theme."""

from __future__ import annotations

import enum


class Theme(enum.Enum):
    LIGHT = 'light'
    DARK = 'dark'

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT
