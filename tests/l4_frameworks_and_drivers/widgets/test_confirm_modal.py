"""Tests for the confirm modal."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from personal_assistant.l4_frameworks_and_drivers.widgets.confirm_modal import ConfirmModal


class ModalHost(App[None]):
    """Minimal app to host the modal for testing."""

    def compose(self) -> ComposeResult:
        yield Static('host')


async def _open(app: ModalHost, pilot, results: list) -> ConfirmModal:
    modal = ConfirmModal('Clear everything?', confirm_label='Clear')
    app.push_screen(modal, results.append)
    await pilot.pause()
    return modal


class TestConfirmModal:
    @pytest.mark.asyncio
    async def test_shows_question(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            modal = await _open(app, pilot, [])
            assert 'Clear everything?' in str(modal.query_one('#confirm-question', Static).content)
            assert str(modal.query_one('#confirm-ok', Button).label) == 'Clear'

    @pytest.mark.asyncio
    async def test_confirm_returns_true(self):
        app = ModalHost()
        results: list = []
        async with app.run_test() as pilot:
            modal = await _open(app, pilot, results)
            modal.query_one('#confirm-ok', Button).press()
            await pilot.pause()
        assert results == [True]

    @pytest.mark.asyncio
    async def test_cancel_returns_false(self):
        app = ModalHost()
        results: list = []
        async with app.run_test() as pilot:
            modal = await _open(app, pilot, results)
            modal.query_one('#confirm-cancel', Button).press()
            await pilot.pause()
        assert results == [False]

    @pytest.mark.asyncio
    async def test_escape_returns_false(self):
        app = ModalHost()
        results: list = []
        async with app.run_test() as pilot:
            await _open(app, pilot, results)
            await pilot.press('escape')
            await pilot.pause()
            assert not isinstance(app.screen, ConfirmModal)
        assert results == [False]
