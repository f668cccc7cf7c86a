"""Tests for file logging setup."""

from __future__ import annotations

import logging

import pytest

from personal_assistant.l4_frameworks_and_drivers.logging_setup import LOG_FILE_NAME, setup_file_logging


@pytest.fixture
def clean_pa_logger():
    logger = logging.getLogger('pa')
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in before:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestSetupFileLogging:
    def test_writes_log_file(self, tmp_path, clean_pa_logger):
        path = setup_file_logging(tmp_path / 'logs')

        logging.getLogger('pa.llm').info('hello from test')
        for handler in clean_pa_logger.handlers:
            handler.flush()

        assert path == tmp_path / 'logs' / LOG_FILE_NAME
        content = path.read_text(encoding='utf-8')
        assert 'hello from test' in content
        assert 'pa.llm' in content

    def test_idempotent(self, tmp_path, clean_pa_logger):
        setup_file_logging(tmp_path)
        setup_file_logging(tmp_path)
        file_handlers = [h for h in clean_pa_logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1

    def test_level(self, tmp_path, clean_pa_logger):
        setup_file_logging(tmp_path, level='warning')
        assert clean_pa_logger.level == logging.WARNING
