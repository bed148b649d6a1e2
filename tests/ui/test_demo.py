"""Tests for the demo app."""

import pytest
from textual.widgets import Static

from dropselect.demo import ITEMS, SelectDemoApp
from dropselect.ui.select import DropSelect, SelectInput


@pytest.mark.asyncio
async def test_demo_reports_selection():
    app = SelectDemoApp()
    async with app.run_test() as pilot:
        app.query_one(SelectInput).focus()
        await pilot.press("t", "h", "enter")
        await pilot.pause()
        assert app.selected == ITEMS[2]
        assert app.query_one(DropSelect).value == ITEMS[2]
        assert "You've selected Three." in str(app.query_one("#selected", Static).render())


@pytest.mark.asyncio
async def test_demo_custom_options():
    app = SelectDemoApp([{"name": "Red"}, {"name": "Green"}], option_label_key="name")
    async with app.run_test() as pilot:
        app.query_one(SelectInput).focus()
        await pilot.press("down", "down", "enter")
        await pilot.pause()
        assert app.selected == {"name": "Green"}
