"""Tests for the Message entity and its wire form."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from personal_assistant.l1_entities.message import Message


class TestMessage:
    def test_default_timestamp_is_utc(self):
        msg = Message(id=1, role='user', content='Hello')
        assert msg.timestamp.tzinfo is not None
        assert msg.timestamp.utcoffset().total_seconds() == 0

    def test_frozen(self):
        msg = Message(id=1, role='user', content='Hello')
        with pytest.raises(ValidationError):
            msg.content = 'changed'

    def test_rejects_system_role(self):
        with pytest.raises(ValidationError):
            Message(id=1, role='system', content='nope')

    def test_to_chat_message(self):
        chat = Message(id=1, role='assistant', content='Hi').to_chat_message()
        assert chat.role == 'assistant'
        assert chat.content == 'Hi'


class TestMessageWire:
    def test_omits_unset_metadata(self):
        wire = Message(id=7, role='user', content='Hello').to_wire()
        assert set(wire) == {'id', 'role', 'content', 'timestamp'}

    def test_includes_metadata_when_set(self):
        ts = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        wire = Message(id=7, role='assistant', content='Hi', timestamp=ts, tokens=33, model='gpt-4').to_wire()
        assert wire['tokens'] == 33
        assert wire['model'] == 'gpt-4'
        assert wire['timestamp'].startswith('2026-01-02T03:04:05')
