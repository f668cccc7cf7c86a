"""File-based logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FILE_NAME = 'assistant.log'


def setup_file_logging(log_dir: Path, level: str = 'INFO') -> Path:
    """Configure file-based logging for the ``pa`` logger tree. Safe to call twice."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME
    root = logging.getLogger('pa')
    root.setLevel(level.upper())
    already = any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path.resolve() for h in root.handlers
    )
    if not already:
        handler = logging.FileHandler(log_path, encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
        root.addHandler(handler)
    logging.getLogger('pa.app').info('Logging started → %s', log_path)
    return log_path
