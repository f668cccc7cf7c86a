"""Shared path constants for configuration and client-local state."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('personal-assistant')
LOG_DIR = user_log_path('personal-assistant')

THEME_PATH = CONFIG_DIR / 'theme'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
